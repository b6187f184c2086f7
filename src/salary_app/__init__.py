"""SalaryApp package.

This package is organized by feature modules (reference data, employees,
salaries) with a thin Flask controller layer over service/repository layers.
"""
