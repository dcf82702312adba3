"""
Transit Catalogue DB - Build Script

in-memory 버스 노선 / 정류장 데이터베이스 패키지
"""

from setuptools import setup, find_packages


setup(
    name='transit-db',
    version='1.0.0',
    author='KindMap Team',
    author_email='team@kindmap.com',
    description='In-memory transit catalogue: bus route statistics and stop lookups',
    long_description='''
    Builds a directed road-distance graph of bus stops from stop and route
    definitions, computes per-route statistics (stop counts, route length,
    curvature) in one pass and answers bus / stop queries. Requests arrive
    as line-oriented text or as a JSON document, over stdio or HTTP.
    ''',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'fastapi>=0.100.0',
        'pydantic>=2.0',
        'python-dotenv>=1.0.0',
        'uvicorn>=0.23.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
            'pytest-mock>=3.10',
            'httpx>=0.24.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'transit-db=transit_db.cli:main',
        ],
    },
    zip_safe=False,
    python_requires='>=3.9',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Topic :: Scientific/Engineering :: GIS',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
    ],
)
