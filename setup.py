"""Install the WordPress login backend."""

from setuptools import setup, find_packages

setup(
    name='wp-login-backend',
    version='0.1.0',
    packages=find_packages(exclude=['*test*']),
    python_requires='>=3.9',
    install_requires=[
        "sqlalchemy>=2.0",
        "pydantic>=2.0",
        "passlib",
        "bcrypt",
        "blinker>=1.6",
        "python-json-logger>=3.1",
    ],
    extras_require={
        'mysql': ["mysqlclient"],
        'test': ["pytest"],
    },
    zip_safe=False
)
