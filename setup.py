from setuptools import setup

setup(
    name='crcs',
    version='0.0.1',
    url='',
    license='AGPL-3.0-only',

    author='Tancredi Orlando',
    author_email='tancredi.orlando@gmail.com',

    description='Bit-serial CRC-8/16/32/64/128 checksums',
    long_description='',

    packages=['crcs'],

    python_requires='>3.10',

    extras_require={
        'dev': [
            'mypy>=0.991',
            'flake8>=5.0.4',
            'pytest>=7.2.0'
        ]
    }
)
