# setup.py
from setuptools import setup, find_packages
import os

# Set LISPY_BUILD_EXT=1 to compile the evaluator hot path with Cython.
# The pure-Python module is used otherwise.
ext_modules = []
if os.environ.get("LISPY_BUILD_EXT") == "1":
    from Cython.Build import cythonize

    ext_modules = cythonize(
        [os.path.join("lispy", "evaluation", "evaluator.py")],
        compiler_directives={'language_level': "3", "boundscheck": False, "wraparound": False}
    )

setup(
    name="lispy",
    version="0.0.0.0.1",
    description="Evaluation kernel of a small Lisp with S- and Q-expressions",
    python_requires=">=3.10",
    packages=find_packages(include=["lispy", "lispy.*"]),
    ext_modules=ext_modules,
    extras_require={
        "test": ["pytest", "hypothesis"],
        "ext": ["Cython>=3.0"],
    },
    entry_points={
        "console_scripts": [
            "lispy=lispy.repl:main",
        ],
    },
    zip_safe=False,
)
