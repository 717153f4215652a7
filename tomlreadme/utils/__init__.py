"""
utils package
-------------
Pure helpers shared by the decoder and the renderers:

- dates: date parsing and serialization
- slugify: anchor link generation
- md: markdown table and fence formatting
"""
