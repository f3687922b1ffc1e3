from setuptools import setup, find_packages

setup(
    name="super_grid",
    version="1.0",
    packages=find_packages(include=["super_grid", "super_grid.*"]),
    package_data={"super_grid": ["templates/*.html"]},
    description="Render tabular data as configurable HTML tables.",
    install_requires=["jinja2"],
    extras_require={"test": ["pytest", "lxml"]},
    entry_points={
        "console_scripts": [
            "super-grid=super_grid.scripts.super_grid:main",
        ],
    },
)
