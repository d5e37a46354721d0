from setuptools import setup, find_namespace_packages

with open("README.md", "r", encoding="utf8") as long_desc_fd:
    long_description = long_desc_fd.read()

with open('version', 'r') as version_fd:
    version = version_fd.read().strip('\n')

requirements = []

with open('requirements.txt', 'r') as requirements_fd:
    for requirement in requirements_fd:
        # skip empty lines
        requirement = requirement.strip()

        if requirement:
            requirements.append(requirement)

setup(
    name="surge",
    version=version,
    author="fakefloordiv",
    description="Immutable HTTP responses: status constructors, headers, cookies",
    long_description=long_description,
    long_description_content_type="text/markdown",
    # there are no __init__.py files, so packages are namespace ones
    packages=find_namespace_packages(include=['surge', 'surge.*']),
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: Cross-platform",
    ],
    python_requires=">=3.8",
    install_requires=requirements,
    extras_require={
        'test': ['pytest'],
    },
)
