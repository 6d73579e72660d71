from setuptools import setup, find_packages

setup(
    name='merkator',
    description='Read and write WGS84 coordinates in sexagesimal and decimal notation.',
    long_description=open('README.md', 'r').read(),
    long_description_content_type='text/markdown',
    version='1.0.0',
    author='Stephan Besser',
    author_email='stephan.besser@googlemail.com',
    packages=find_packages(where='src'),
    package_dir={'': 'src'},
    include_package_data=True,
    python_requires='>=3.8',
    install_requires=[
        'numpy',
        'pandas'
    ],
    extras_require={
        'test': ['pytest']
    },
    classifiers=[
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)'
    ],
    zip_safe=True
)
