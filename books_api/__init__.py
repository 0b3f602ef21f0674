"""Shelfshare books API: books and authors over a relational store."""
