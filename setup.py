from setuptools import find_namespace_packages, setup


setup(
    name="piranhito",
    version="1.0.0",
    description="Transformador de fuentes basado en marcadores de funcionalidad",
    author="GAHEOS",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["piranhito", "piranhito.*"]),
    install_requires=[],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["piranhito=piranhito.cli:main"]},
)
