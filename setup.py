from setuptools import setup, find_packages

setup(
    name='sqidcodec',
    version='1.0',
    description='Short, reversible identifiers for lists of non-negative integers.',
    packages=find_packages(include=['sqidcodec', 'sqidcodec.*']),
    python_requires='>=3.8',
    install_requires=[
        'pydantic>=2',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['sqidcodec=sqidcodec.cli:main'],
    },
)
