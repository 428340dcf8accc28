"""CRUD operations for element entities using FastCRUD."""

from fastcrud import FastCRUD

from .models import Element, ElementSet, ElementText

element_set_crud: FastCRUD = FastCRUD(ElementSet)
element_crud: FastCRUD = FastCRUD(Element)
element_text_crud: FastCRUD = FastCRUD(ElementText)
