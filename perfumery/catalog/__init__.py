"""
Perfume catalog package.

Responsibilities:
- Define the canonical Perfume, AromaTag and Note records.
- Load the catalog snapshot supplied by external storage.
- Answer read-side catalog queries (lookup, search, aroma listings).
- Create, update and delete perfumes and aroma tags in process.
"""
