from setuptools import setup

setup(
    name="tagcloud",
    version="0.1",
    packages=["tagcloud"],
    license="",
    description="HTML tag cloud generator for text files",
    python_requires=">=3.11",
    entry_points={
        "console_scripts": ["tagcloud=tagcloud.__main__:main"],
    },
    install_requires=[
        "coloredlogs",
        "pydantic>=1.10.2",
        "rich>=12.3.0",
        "typing_extensions>=4.4.0",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
