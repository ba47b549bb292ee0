from setuptools import setup

setup(name='padics',
      version='0.1.0',
      description='Fixed precision p-adic integers in Python: conversions, '
                  'addition, logarithm and exponential',
      url='https://github.com/Onidsouza/pyadics',
      author='Henrique Souza',
      author_email='henrique.ams.souza@gmail.com',
      license='GNU General Public License v3.0',
      packages=['padics'],
      python_requires='>=3.8',
      install_requires=['gmpy2', 'sympy'],
      extras_require={'test': ['pytest']},
      zip_safe=False)
