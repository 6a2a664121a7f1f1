from setuptools import setup, find_packages

with open("README.rst", encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="attractors",
    version="0.1.0",

    description="Interactive explorer of two-dimensional strange attractors",

    long_description=long_description,
    long_description_content_type="text/x-rst",

    license="MIT",

    classifiers=[
        "Development Status :: 3 - Alpha",

        "Intended Audience :: Science/Research",

        "License :: OSI Approved :: MIT License",

        "Programming Language :: Python :: 3",

        "Topic :: Scientific/Engineering",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Scientific/Engineering :: Visualization",
    ],

    keywords="strange-attractors chaos lyapunov-exponent nonlinear dynamical-systems",

    packages=find_packages(exclude=["tests", "tests.*", "examples"]),

    install_requires=["numpy", "PyQt5"],

    extras_require={
        "test": ["pytest"],
    },

    python_requires=">=3.6",

    entry_points={
        "gui_scripts": [
            "attractors = attractors.app:main",
        ],
    },
)
