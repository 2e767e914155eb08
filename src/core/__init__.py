"""
Core numeric building blocks.

Ошибки, логирование, реестр констант, контракты сериализации и
десятичная арифметика произвольной точности (src.core.math).
"""
