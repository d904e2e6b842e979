# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='markwright',
  version='0.1.0',
  description='Markwright builds trees of markup nodes with plain function calls and renders them to escaped HTML.',
  python_requires='>=3.10',

  packages=['markwright', 'utest'],
  entry_points={
    'console_scripts': [
      'markwright=markwright.__main__:main',
      'utest=utest.__main__:main',
    ],
  },
)
