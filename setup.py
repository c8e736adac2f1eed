# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="schematree",
    version="0.1.0",
    description="Hierarchical namespace tree built from dotted schema paths",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["schematree*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'schematree=schematree.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
