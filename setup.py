# setup.py
from setuptools import setup, find_packages

setup(
    name="compositree",
    version="1.0.0",
    description="Composite-pattern trees with pre-order rendering and a tree CLI",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'compositree=compositree.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
