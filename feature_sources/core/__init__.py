"""
Core descriptor models, codec and errors.
"""
