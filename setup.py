from setuptools import setup, find_packages
import os

install_requires = ["pydantic>=2"]

# Define optional dependencies for development
extras_require = {"dev": ["pytest"]}

setup(
    name="valuascript-signatures",
    version="1.1.0",
    packages=find_packages(where=".", exclude=["tests", "tests.*"]),
    install_requires=install_requires,
    extras_require=extras_require,
    entry_points={
        "console_scripts": [
            "vsig = vsig.cli:main",
        ],
    },
    include_package_data=True,
    package_data={},
    author="Alessio Marcuzzi",
    author_email="alemarcuzzi03@gmail.com",
    description="Function signature model for the ValuaScript type checker.",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    url="https://github.com/Alessio2704/monte-carlo-simulator",
)
