from setuptools import setup, find_packages

setup(
    name="h3vertex",
    version="0.1.0",
    description="Vertex numbering and rotation resolution for H3 grid cells",
    author="Kaveh",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.10",
    install_requires=[
        "h3>=4.0.0",
        "pyyaml>=6.0",
        "click>=8.0",
        "rich>=13.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "h3vertex=h3vertex.cli:main",
        ],
    },
)
