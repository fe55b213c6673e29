from setuptools import setup, find_packages

setup(
    name="starter_select",
    version="0.1.0",
    packages=find_packages(include=["core", "core.*", "config", "config.*", "desktop_ui", "desktop_ui.*"]),
    py_modules=["main"],
    package_data={
        "desktop_ui": ["qml/*.qml", "assets/*"],
    },
    install_requires=[
        "PySide6>=6.7",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.4"],
    },
    entry_points={
        "gui_scripts": ["starter-select=desktop_ui.app:main"],
    },
    python_requires=">=3.10",
)
