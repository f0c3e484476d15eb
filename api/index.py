"""Vercel serverless entry point for figwind."""
import sys
import os

# Add src to path so imports work
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from figwind.store.db import Database
from figwind.store.dictionary import DictionaryStore
from figwind.store.migrations import run_migrations
from figwind.web.app import create_app

# In-memory DB for serverless demo
db = Database(":memory:")
db.connect()
run_migrations(db)

# Seed a few sample variables so the demo isn't empty
DictionaryStore(db).update({
    "--Heading-Font": "mackinac",
    "--Border-Medium": "border-gray-400",
    "--Text-Primary": "text-gray-900",
})

app = create_app(db=db)
