from jinja2 import Environment, PackageLoader, select_autoescape

env = Environment(
    loader=PackageLoader("super_grid", "templates"),
    autoescape=select_autoescape(["html", "xml"]),
)

standalone_grid_template = env.get_template("standalone_grid.html")
