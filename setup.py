from setuptools import find_packages, setup


setup(
    name="lokitext",
    version="0.3.0",
    description="Pure text transforms, reversible codecs and classical pattern search",
    author="GAHEOS",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[],
    extras_require={"test": ["pytest>=7"]},
)
