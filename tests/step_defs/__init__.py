"""Step definitions package for BDD tests.

Step modules are organised by page/functionality. Every module in this
package (except helpers) is registered as a pytest plugin by the root
conftest.py so pytest-bdd can find its steps.
"""
