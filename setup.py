from setuptools import setup

setup(
    name="squeeze",
    version="0.1.0",
    description="Tool for resolving asset paths in stylesheets and scripts",
    license="MIT",
    packages=["squeeze"],
    python_requires=">=3.7",
    install_requires=["PyYAML>=4.2b1"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["squeeze = squeeze.cli:main"]},
)
