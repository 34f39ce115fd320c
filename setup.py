import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="regionmesh",
    version="0.1.0",
    description="2D triangular meshing of planar regions bounded by closed curves",
    long_description=long_description,
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=setuptools.find_packages(where="src"),
    install_requires=[
        "numpy",
        "scipy",
        "triangle",
        "matplotlib",
        "pydantic>=2",
    ],
    extras_require={
        "shapely": ["shapely"],
        "test": ["pytest", "shapely"],
    },
    entry_points={
        "console_scripts": [
            "regionmesh=regionmesh.cli:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
