"""Use-case layer for the list view model.

Each module wraps exactly one ``ListPort`` call, maps adapter failures to
``UseCaseError`` and returns the server snapshot unchanged.
"""
