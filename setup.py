# DEPENDENCIES
from setuptools import setup
from setuptools import find_packages


# Read the long description from README.md if it exists

readme_path = "README.md"

try:
    with open(readme_path, "r", encoding="utf-8") as fh:
        long_description = fh.read()

except FileNotFoundError:
    long_description = "Clause matching and risk scoring for BC residential rental contracts"

setup(name                          = "rental-contract-analyzer",
      version                       = "1.0.0",
      description                   = "Detects problematic clauses in BC residential rental contracts and produces a risk report.",
      long_description              = long_description,
      long_description_content_type = "text/markdown",
      packages                      = find_packages(exclude = ["tests", "tests.*"]),
      py_modules                    = ["app", "launch"],
      classifiers                   = ["Development Status :: 4 - Beta",
                                       "Intended Audience :: Legal Industry",
                                       "License :: OSI Approved :: MIT License",
                                       "Operating System :: OS Independent",
                                       "Programming Language :: Python :: 3",
                                       "Programming Language :: Python :: 3.10",
                                       "Programming Language :: Python :: 3.11",
                                      ],
      python_requires               = ">=3.10",
      install_requires              = ["fastapi>=0.104.1",
                                       "uvicorn[standard]>=0.24.0",
                                       "pydantic>=2.5.0",
                                       "pydantic-settings>=2.1.0",
                                       "python-multipart>=0.0.6",
                                       "reportlab>=4.0.0",
                                       "PyPDF2>=3.0.0",
                                       "requests>=2.31.0",
                                      ],
      extras_require                = {"dev" : ["black>=23.10.0", "isort>=5.12.0", "flake8>=6.0.0", "pytest>=7.4.0", "httpx>=0.25.0"],
                                      },
      entry_points                  = {"console_scripts": ["rental-contract-analyzer=app:main"]},
      include_package_data          = True,
     )
