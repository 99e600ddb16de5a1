from setuptools import setup, find_packages

setup(name = "printmail",
      version = "0.1.0",
      description = "Support-free printable chainmail lattices as CSG trees",
      keywords = "cad csg chainmail 3d-printing",
      license = "GPL",
      packages = find_packages(include = ["printmail", "printmail.*"]),
      python_requires = ">=3.9",
      install_requires = [
        "numpy",
        "pillow",
        "pymcubes",
        "numpy-stl",
        ],
      extras_require = {
        "test": [
          "pytest",
          "hypothesis",
          "trimesh",
          ],
        },

      zip_safe = False,
      )
