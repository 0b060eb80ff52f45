from setuptools import setup, find_packages

setup(
    name='convspeech',
    version='1.0.0',
    packages=find_packages(include=['convspeech', 'convspeech.*']),
    include_package_data=True,
    python_requires='>=3.10',
    install_requires=[
        'colored>=2.2.3',
        'halo>=0.0.31',
        'librosa>=0.10.1',
        'numpy>=1.26.2',
        'python-dotenv>=1.0.0',
        'soundfile>=0.12.1',
    ],
    extras_require={
        'test': ['pytest>=7.4'],
    },
    entry_points='''
        [console_scripts]
        convspeech=convspeech.__main__:main
    ''',
    license='MIT',
    keywords='conversational speech timeline audio',
    description='Builds and validates multi-party conversational speech timelines',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
)
