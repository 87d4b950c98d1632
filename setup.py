import setuptools

setuptools.setup(
    name='sql-splitter',
    version='1.0.0',
    description='Split an SSMS "Script Objects" dump into one file per object',
    python_requires='>=3.8',
    install_requires = [],
    extras_require = {
        "test" : ["pytest>=7"],
    },
    packages = ["sqlsplitter"],
    entry_points = {
        "console_scripts" : [
            "sql-splitter=sqlsplitter.sql_splitter:command_line",
        ]
    }
)
