from setuptools import setup, find_packages
import os

install_requires = ["lark", "pydantic>=2.0"]

# Define optional dependencies for development and specific features
extras_require = {"dev": ["pytest"], "lsp": ["pygls>=1.0.0,<2.0", "lsprotocol"]}  # Language Server Protocol support

setup(
    name="codesense-engine",
    version="1.0.0",
    packages=find_packages(where=".", exclude=["tests", "tests.*"]),
    install_requires=install_requires,
    extras_require=extras_require,
    entry_points={
        "console_scripts": [
            "codesense = codesense.cli:main",
        ],
    },
    include_package_data=True,
    package_data={"codesense.inference": ["*.lark"]},
    description="Tokenizer, parser, scope table and type inference engine powering editor autocompletion.",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
)
