# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="treenav",
    version="1.1.0",
    description="Navegador de árboles n-arios con cursor, vista gráfica y línea de comandos",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["treenav", "treenav.*"]),
    python_requires=">=3.8",
    install_requires=[
        "customtkinter",  # Interfaz gráfica (interface/gui)
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'treenav=treenav.main:main',  # CLI con argumentos, GUI sin ellos
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
