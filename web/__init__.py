"""
web - Flask JSON API
"""
