from setuptools import find_packages, setup

setup(
    name="assoclist",
    version="0.1",
    packages=find_packages("src"),
    package_dir={"": "src"},
    license="MIT License",
    description="An associative list of key/value pairs searched by key equality",
    python_requires=">=3.9",
    install_requires=[
        "attrs",
        "pyrsistent",
        "typing_extensions",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["assoclist = assoclist.cli:invoke_cli"],
    },
)
