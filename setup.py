#!/usr/bin/env python3
"""
Setup script for brk for tools that still invoke setup.py directly.

All metadata lives in pyproject.toml ([tool.poetry]); this only translates it.
"""

import sys

from setuptools import find_packages, setup

try:
    import tomllib

    with open("pyproject.toml", "rb") as f:
        pyproject_data = tomllib.load(f)

    poetry = pyproject_data["tool"]["poetry"]

    # Optional dependencies only belong to extras
    install_requires = []
    extras_require: dict[str, list[str]] = {}
    optional: dict[str, str] = {}
    for dep, version_spec in poetry["dependencies"].items():
        if dep == "python":
            continue
        if isinstance(version_spec, str):
            install_requires.append(f"{dep}{version_spec}")
        elif version_spec.get("optional"):
            optional[dep] = f"{dep}{version_spec.get('version', '')}"
        else:
            install_requires.append(f"{dep}{version_spec.get('version', '')}")
    for extra, deps in poetry.get("extras", {}).items():
        extras_require[extra] = [optional[d] for d in deps if d in optional]

    console_scripts = [f"{name}={target}" for name, target in poetry.get("scripts", {}).items()]

    setup(
        name=poetry["name"],
        version=poetry["version"],
        description=poetry["description"],
        author=poetry["authors"][0],
        license=poetry["license"],
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        install_requires=install_requires,
        extras_require=extras_require,
        entry_points={"console_scripts": console_scripts},
        python_requires=">=3.11,<4.0",
        zip_safe=False,
    )

except Exception as e:
    print(f"Error reading pyproject.toml: {e}")
    sys.exit(1)
