# setup.py
from setuptools import setup, find_packages

setup(
    name="tracer3d",
    version="0.1.0",
    description="float32 Vec3 kernel and PPM output for a CPU ray tracer",
    packages=find_packages(include=["tracer3d", "tracer3d.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.24.0",
        "numba>=0.57.0",
        "Pillow>=9.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
