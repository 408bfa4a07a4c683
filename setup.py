from setuptools import setup, find_packages

__version__ = "0.1.0"


def get_long_desc():
    return open('README.rst', 'r').read()


def get_requirements():
    lines = open('requirements.txt', 'r').readlines()
    reqs = [line.strip() for line in lines if line.strip()]
    return reqs


setup(
    name="kagami",
    version=__version__,
    packages=find_packages(include=["kagami", "kagami.*"]),
    description="Kagami mirrors Kubernetes API objects as Python dataclasses and "
                "moves them losslessly to and from JSON and YAML",
    long_description=get_long_desc(),
    long_description_content_type="text/x-rst",
    keywords=["Kubernetes", "modelling", "YAML", "JSON", "modeling",
              "codec", "serialization", "REST client"],
    install_requires=get_requirements(),
    extras_require={"test": ["pytest"]},
    python_requires=">=3.8",
    classifiers=["Development Status :: 4 - Beta",
                 "Intended Audience :: Developers",
                 "Intended Audience :: Information Technology",
                 "License :: OSI Approved :: MIT License",
                 "Operating System :: OS Independent",
                 "Programming Language :: Python :: 3 :: Only",
                 "Programming Language :: Python :: 3.8",
                 "Programming Language :: Python :: 3.9",
                 "Programming Language :: Python :: 3.10",
                 "Programming Language :: Python :: 3.11",
                 "Programming Language :: Python :: 3.12",
                 "Topic :: Software Development",
                 "Topic :: Software Development :: Libraries",
                 "Topic :: Software Development :: Libraries :: Python Modules",
                 "Topic :: Text Processing :: Markup",
                 "Topic :: Utilities",
                 "Typing :: Typed"],
    license="MIT"
)
