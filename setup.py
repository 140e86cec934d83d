from setuptools import setup, find_packages

setup(
    name="scrypt-params",
    description="Pick scrypt cost parameters (N, r, p) for a memory and time budget",
    long_description=open("README.md", 'r').read(),
    long_description_content_type='text/markdown',

    install_requires=[
        "scrypt>=0.8.17",
    ],

    extras_require={
        "test": [
            "pytest",
        ],
    },

    packages=find_packages(exclude=["tests", "tests.*", "performance"]),

    setup_requires=["setuptools_scm"],
    use_scm_version={
        "write_to": "scryptparams/scmversion.py",
        "write_to_template": "__version__ = '{version}'\n",
        "fallback_version": "0.1.0",
    },

    include_package_data=True,

    entry_points={
        'console_scripts': [
            'scrypt-params=scryptparams.scripts.pick:main',
            'scrypt-params-version=scryptparams.scripts.version:main',
        ],
    },

    license="Zlib",
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',

        'Intended Audience :: Developers',

        'License :: OSI Approved :: zlib/libpng License',

        'Operating System :: MacOS :: MacOS X',
        'Operating System :: Microsoft :: Windows',
        'Operating System :: POSIX',

        'Programming Language :: Python',
        'Topic :: Security :: Cryptography',
    ],
)
