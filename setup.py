import pathlib
from setuptools import setup

from curvetools import __doc__ as docstring

setup(
    name="curvetools",
    version="0.1",
    description=docstring.strip(),
    long_description=(pathlib.Path(__file__).parent / "README.rst").read_text(),
    long_description_content_type="text/x-rst",
    license="MIT",
    classifiers=[
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
    ],
    python_requires=">=3.8",
    packages=[
        "curvetools",
        "curvetools.EC",
        "curvetools.BLS",
    ],
    install_requires=[
        "py_ecc",
    ],
    extras_require={
        'test': ['pytest'],
    },
)
