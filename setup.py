from setuptools import setup, find_packages


__version__ = '0.1.0'

with open("README.md", 'r') as readme_file:
    long_description = readme_file.read()

setup(
    name="optmatch",
    version=__version__,
    author="Yuyao Huang",
    author_email="huangyuyao@outlook.com",
    description="Regular expression driven command line option dispatch",
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=["tests", "tests.*", "examples", "docs"]),
    python_requires=">=3.8",
    install_requires=[
        "rich",
        "docstring_parser",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
)
