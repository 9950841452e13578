from setuptools import setup

setup(name="geogetter",
  version="0.1",
  description="A client for looking up places with the OpenStreetMap Nominatim service.",
  license="MIT",
  packages=["geogetter"],
  package_dir={'geogetter': 'src'},
  package_data={'geogetter': ['map.txt']},
  install_requires=["requests", "configparser"],
  extras_require={'test': ["pytest"]},
  python_requires="~=3.9",
  entry_points="""
    [console_scripts]
    geogetter=geogetter.cli:cli
  """)
