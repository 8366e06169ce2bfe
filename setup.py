from setuptools import find_packages, setup

setup(
    name="keyedlist",
    version="0.1",
    description="immutable, order-preserving list of elements indexed by their id",
    packages=find_packages(include=["keyedlist", "keyedlist.*"]),
    python_requires=">=3.9",
    install_requires = [
        "numpy",
        "pandas",
        "jsonschema",
    ],
    extras_require = {
        "test": ["pytest"],
    },
)
