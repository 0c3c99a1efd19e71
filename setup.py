"""Setup script for the wlcolor package."""

from setuptools import setup, find_packages

requires = ["colorama>=0.4.3", "colour>=0.1.5", "hexdump>=3.3"]

extras_require = {"test": ["pytest>=6.0"]}

__version__ = None
exec(open("src/wlcolor/version.py").read())

setup(
    name="wlcolor",
    version=__version__,
    description="Color values for drawing buffers painted by a compositor",
    packages=find_packages("src"),
    package_dir={"": "src"},
    include_package_data=True,
    install_requires=requires,
    extras_require=extras_require,
    python_requires=">=3.7",
    test_suite="test",
)
