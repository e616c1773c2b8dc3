from setuptools import find_packages, setup

setup(
    name="hmpy",
    version="0.1.0",
    description="Parsing, validation and rendering of Hermann-Mauguin symbols",
    package_dir={"": "src"},
    packages=find_packages("src"),
    package_data={"hmpy.crystal": ["*.json"]},
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest", "numpy"],
    },
    entry_points={
        "console_scripts": ["hmpy-symbol=hmpy.cmd.symbol:main"],
    },
)
