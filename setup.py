import pathlib
import re

from setuptools import setup

ROOT = pathlib.Path(__file__).parent


with open(ROOT / "steamidio" / "__metadata__.py") as f:
    try:
        VERSION = re.findall(r'^__version__\s*=\s*"([^"]*)"', f.read(), re.MULTILINE)[0]
    except IndexError:
        raise RuntimeError("Version is not set") from None

with open(ROOT / "README.md", encoding="utf-8") as f:
    README = f.read()

EXTRA_REQUIRES = {}

for feature in (ROOT / "requirements").glob("*.txt"):
    with open(feature, "r", encoding="utf-8") as f:
        EXTRA_REQUIRES[feature.with_suffix("").name] = f.read().splitlines()

REQUIREMENTS = EXTRA_REQUIRES.pop("default")


setup(
    name="steamidio",
    author="Gobot1234",
    version=VERSION,
    packages=[
        "steamidio",
        "steamidio.types",
    ],
    package_data={
        "steamidio": ["py.typed"],
    },
    license="MIT",
    description="Parse, validate and convert Steam IDs",
    long_description=README,
    long_description_content_type="text/markdown",
    include_package_data=True,
    install_requires=REQUIREMENTS,
    extras_require=EXTRA_REQUIRES,
    python_requires=">=3.10",
    entry_points={"console_scripts": ["steamidio = steamidio.__main__:app"]},
    keywords="steam steamid steam-id",
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: MIT License",
        "Intended Audience :: Developers",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Libraries",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
