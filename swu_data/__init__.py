"""
SWU Data, a Star Wars: Unlimited card data scraper
MIT License
"""
