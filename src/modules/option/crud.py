"""CRUD operations for option entities using FastCRUD."""

from fastcrud import FastCRUD

from .models import Option

option_crud: FastCRUD = FastCRUD(Option)
