"""CRUD operations for item entities using FastCRUD."""

from fastcrud import FastCRUD

from .models import Item

item_crud: FastCRUD = FastCRUD(Item)
