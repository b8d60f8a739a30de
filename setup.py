"""Package route_picker: candidate running routes over OSM footways."""
from setuptools import find_packages, setup

setup(
    name="route-picker",
    version="0.1.0",
    description="Suggest out-and-back and loop running routes of a target distance.",
    packages=find_packages(include=["route_picker", "route_picker.*"]),
    python_requires=">=3.10",
    install_requires=[
        "requests",
        "numpy",
        "networkx",
        "polyline",
        "python-dotenv",
        "fastapi",
        "pydantic",
        "uvicorn",
    ],
    extras_require={
        "test": ["pytest", "httpx", "geopy"],
    },
    entry_points={
        "console_scripts": [
            "route-picker=route_picker.__main__:main",
            "route-picker-server=route_picker.server:main",
        ],
    },
)
