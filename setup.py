# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="batchjson",
    version="1.0.0",
    description="Batch loader for directories of JSON files with per-file timing and failure isolation",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["batchjson", "batchjson.*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'batchjson=batchjson.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
