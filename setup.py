from setuptools import setup, find_packages

with open('requirements.txt') as f:
    required = f.read().splitlines()

setup(
    name = 'buildkit-provider',
    version = '0.1.0',
    description = 'BuildKit provider plugin: configuration schema, validation and capability registry',
    packages = find_packages(exclude=['test', 'test.*']),
    python_requires = '>=3.10',
    install_requires = required,
    extras_require = {
        'test': ['pytest>=7.4.0', 'pytest-cov>=4.0.0']
    }
)
