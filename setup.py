from setuptools import setup, find_packages
import re

# Read version from overtimecalc/__init__.py
with open('overtimecalc/__init__.py') as f:
    version = re.search(r'^__version__ = ["\']([^"\']+)["\']', f.read(), re.MULTILINE).group(1)

setup(
    name='overtime-calc',
    version=version,
    packages=find_packages(exclude=['tests', 'tests.*']),
    package_data={
        'overtimecalc.sdk.taxes': ['tax_rules/*.yaml'],
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
            'overtime-calc=overtimecalc.cli.__main__:main',
            'overtime-calc-mcp=overtimecalc.mcp.server:run_server',
        ],
    },
    author='Personal',
    description='Take-home pay on overtime under Norwegian tax withholding (tabelltrekk).',
    python_requires='>=3.10',
)
