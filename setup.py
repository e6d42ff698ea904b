import setuptools

# Developer self-reminder for uploading in pypi:
# - install: wheel, twine
# - build  : python setup.py bdist_wheel
# - deploy : twine upload dist/*

long_description = "Weighted PageRank for directed graphs with accumulating edge weights."

setuptools.setup(
    name='weightrank',
    version='0.1.0',
    description="Weighted PageRank of directed graphs",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
         "Programming Language :: Python :: 3",
         "License :: OSI Approved :: Apache Software License",
         "Operating System :: OS Independent",
     ],
    python_requires=">=3.8",
    install_requires=[
          'numpy', 'networkx',
      ],
    extras_require={
          'test': ['pytest', 'scipy'],
      },
 )
