from setuptools import setup

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="easy-collections",
    version="0.3.0",
    description="Wrappers around the builtin set and dict which make them a little more convenient for prototyping and short scripts.",
    packages=["easy_collections", "easy_collections._src"],
    python_requires=">=3.9",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    long_description = long_description,
    long_description_content_type = "text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3.9",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
