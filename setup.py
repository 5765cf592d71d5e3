from setuptools import setup, find_packages

version = open('VERSION').read().strip()

setup(
    name="selcaps",
    version=version,
    packages=find_packages(exclude=["tests", "examples"]),
    install_requires=[
        "selenium>=4.26",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.8",
    description="Capability resolution and construction for Selenium "
    "drivers.",
    license="MPL 2.0",
    keywords=["selenium", "webdriver", "capabilities", "testing"],
    classifiers=[
        "Programming Language :: Python :: 3 :: Only",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)",
        "Operating System :: POSIX",
        "Topic :: Software Development :: Testing",
        "Topic :: Software Development :: Quality Assurance"
    ],
)
