import setuptools

with open('README.md', 'r') as fh:
    long_description = fh.read()

setuptools.setup(
    name='pngcracker',
    version='0.1.0',
    author='pngcracker developers',
    description='Tools for hiding messages in PNG chunks.',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        'deal',
        'parse',
        'pyyaml',
        'typer',
    ],
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Programming Language :: Python :: 3',
        'Environment :: Console',
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
        'Intended Audience :: Developers',
        'Operating System :: OS Independent',
        'Topic :: Multimedia :: Graphics',
        'Topic :: Utilities'
    ],
    python_requires='>=3.8',
    keywords='png chunk crc steganography encode decode'
)
