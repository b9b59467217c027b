from setuptools import setup, find_packages
import re

# Read version from payforecast/__init__.py
with open('payforecast/__init__.py') as f:
    version = re.search(r'^__version__ = ["\']([^"\']+)["\']', f.read(), re.MULTILINE).group(1)

setup(
    name='pay-forecast',
    version=version,
    packages=find_packages(exclude=['tests', 'tests.*']),
    package_data={
        'payforecast': ['tax_schemas/*.yaml'],
    },
    install_requires=[
        'PyYAML>=6.0',
        'click>=8.0',
        'pydantic>=2.0.0',
        'rich>=13.0',
    ],
    extras_require={
        'mcp': [
            'mcp[cli]>=1.0.0,<2',
        ],
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'pay-forecast=payforecast.cli.__main__:main',
            'pay-forecast-mcp=payforecast.mcp.server:run_server',
        ],
    },
    author='Personal',
    description='Multi-year compensation, social insurance, and tax projections.',
    python_requires='>=3.10',
)
