[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oledtext"
version = "0.1.0"
description = "Draw short UTF-8 text messages into an SSD1306 OLED frame buffer and send it over an I2C bus"
requires-python = ">=3.10"
dependencies = []
keywords = ["ssd1306", "oled", "i2c", "display", "font", "embedded"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["oledtext"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
