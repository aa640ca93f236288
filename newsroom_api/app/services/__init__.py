"""
Service layer abstraction.

``EntityStore`` owns one ordered collection and its CRUD rules;
``RelationalIndex`` answers the article-by-parent queries on top of
the article store.  Handlers never touch the underlying lists.
"""
