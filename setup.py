from setuptools import setup

setup(
    name='reads_map',
    version='0.1.0',
    url='https://github.com/tripitakit/reads_map',

    author='Patrick De Marta',

    description='Visualizing reads aligned to a reference sequence as text, HTML, or alignment-preserving FASTA',

    packages=[
        'reads_map',
        'reads_map.render',
    ],

    scripts=[
        'reads_map/reads-map',
    ],

    install_requires=[
        'hits>=0.3.3',
        'pysam>=0.14',
        'PyYAML>=3.12',
        'tqdm>=4.31.1',
    ],

    extras_require={
        'test': [
            'pytest>=6.0',
        ],
    },

    python_requires='>=3.7',

    classifiers=[
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.7',
    ],
)
