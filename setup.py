# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="pathtree",
    version="0.1.0",
    description="Render lists of slash-delimited paths as tree-style line art",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["pathtree", "pathtree.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'pathtree=pathtree.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
