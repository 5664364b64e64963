from re import search
from setuptools import setup, find_packages

with open("src/extended_collections/version.py") as version_file:
    version = search('version = "(.*)"', version_file.read()).group(1)

with open("README.md") as readme_file:
    readme = readme_file.read()

setup(
    name="extended-collections",
    version=version,
    description="Insertion-ordered and weakly referencing maps and sets"
    " with a rich, functional interface.",
    long_description=readme,
    long_description_content_type="text/markdown",
    keywords="collections map set ordered weakref",
    license="MIT license",
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
    install_requires=['typing-extensions>=4.1; python_version < "3.10"'],
    extras_require={"test": ["pytest>=7.0", "pytest-describe>=2.0"]},
    python_requires=">=3.9,<4",
    packages=find_packages("src"),
    package_dir={"": "src"},
    # PEP-561: https://www.python.org/dev/peps/pep-0561/
    package_data={"extended_collections": ["py.typed"]},
    include_package_data=True,
    zip_safe=False,
)
