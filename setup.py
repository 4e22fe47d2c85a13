from setuptools import setup

setup(
    name='jhsiao-records',
    version='0.0.1',
    author='Jason Hsiao',
    author_email='oaishnosaj@gmail.com',
    description='Binary record framing over buffers and streams',
    packages=['jhsiao.records'],
    python_requires='>=3.6',
    extras_require={
        'test': ['pytest', 'numpy'],
    },
)
