# src/pizzeria/domain/models.py
from __future__ import annotations

from enum import StrEnum
from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator

# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------


class PizzaType(StrEnum):
    CHEESE = "cheese"
    PEPPERONI = "pepperoni"
    CLAM = "clam"
    VEGGIE = "veggie"


class PizzaStyle(StrEnum):
    NY = "ny"
    CHICAGO = "chicago"


# ---------------------------------------------------------------------------
# Product: Pizza
# Each regional variant is its own subclass; the recipe lives in the defaults.
# ---------------------------------------------------------------------------


class Pizza(BaseModel):
    """
    A pizza as handed out by a store.

    Instances are immutable. The workflow steps only describe what happens
    to the pizza, they never change it.
    """

    name: str = Field(min_length=1, max_length=128)
    style: PizzaStyle
    pizza_type: PizzaType
    dough: str
    sauce: str
    toppings: tuple[str, ...] = ()
    slicing: Literal["diagonal", "square"] = "diagonal"
    # Name der konkreten Variante, bleibt bei Serialisierung erhalten
    variant: str = ""

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def pin_variant_identity(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        if cls is Pizza:
            # Generische Pizza (z.B. Re-Validierung einer Response): Variante übernehmen
            return data if data.get("variant") else {**data, "variant": cls.__name__}

        pinned = {
            "variant": cls.__name__,
            "style": cls.model_fields["style"].default,
            "pizza_type": cls.model_fields["pizza_type"].default,
            "slicing": cls.model_fields["slicing"].default,
        }
        for field_name, value in pinned.items():
            if field_name in data and data[field_name] != value:
                raise ValueError(f"{cls.__name__}.{field_name} ist fest auf '{value}' gesetzt")
        return {**data, **pinned}

    def describe(self) -> str:
        toppings = ", ".join(self.toppings) if self.toppings else "no toppings"
        return f"{self.name} ({self.dough}, {self.sauce}; {toppings})"

    def prepare(self) -> str:
        step = f"Preparing {self.name}: tossing {self.dough}, adding {self.sauce}"
        if self.toppings:
            step += f", adding toppings: {', '.join(self.toppings)}"
        return step

    def bake(self) -> str:
        return "Bake for 25 minutes at 350"

    def cut(self) -> str:
        return f"Cutting the pizza into {self.slicing} slices"

    def box(self) -> str:
        return "Place pizza in official PizzaStore box"


class NYStyleCheesePizza(Pizza):
    name: str = "NY Style Sauce and Cheese Pizza"
    style: PizzaStyle = PizzaStyle.NY
    pizza_type: PizzaType = PizzaType.CHEESE
    dough: str = "Thin Crust Dough"
    sauce: str = "Marinara Sauce"
    toppings: tuple[str, ...] = ("Grated Reggiano Cheese",)


class NYStylePepperoniPizza(Pizza):
    name: str = "NY Style Pepperoni Pizza"
    style: PizzaStyle = PizzaStyle.NY
    pizza_type: PizzaType = PizzaType.PEPPERONI
    dough: str = "Thin Crust Dough"
    sauce: str = "Marinara Sauce"
    toppings: tuple[str, ...] = ("Grated Reggiano Cheese", "Sliced Pepperoni", "Garlic")


class NYStyleClamPizza(Pizza):
    name: str = "NY Style Clam Pizza"
    style: PizzaStyle = PizzaStyle.NY
    pizza_type: PizzaType = PizzaType.CLAM
    dough: str = "Thin Crust Dough"
    sauce: str = "Marinara Sauce"
    toppings: tuple[str, ...] = ("Grated Reggiano Cheese", "Fresh Clams from Long Island Sound")


class ChicagoStyleCheesePizza(Pizza):
    name: str = "Chicago Style Deep Dish Cheese Pizza"
    style: PizzaStyle = PizzaStyle.CHICAGO
    pizza_type: PizzaType = PizzaType.CHEESE
    dough: str = "Extra Thick Crust Dough"
    sauce: str = "Plum Tomato Sauce"
    toppings: tuple[str, ...] = ("Shredded Mozzarella Cheese",)
    slicing: Literal["diagonal", "square"] = "square"


class ChicagoStylePepperoniPizza(Pizza):
    name: str = "Chicago Style Pepperoni Pizza"
    style: PizzaStyle = PizzaStyle.CHICAGO
    pizza_type: PizzaType = PizzaType.PEPPERONI
    dough: str = "Extra Thick Crust Dough"
    sauce: str = "Plum Tomato Sauce"
    toppings: tuple[str, ...] = ("Shredded Mozzarella Cheese", "Sliced Pepperoni", "Black Olives")
    slicing: Literal["diagonal", "square"] = "square"


class ChicagoStyleVeggiePizza(Pizza):
    name: str = "Chicago Deep Dish Veggie Pizza"
    style: PizzaStyle = PizzaStyle.CHICAGO
    pizza_type: PizzaType = PizzaType.VEGGIE
    dough: str = "Extra Thick Crust Dough"
    sauce: str = "Plum Tomato Sauce"
    toppings: tuple[str, ...] = ("Shredded Mozzarella Cheese", "Spinach", "Eggplant", "Black Olives")
    slicing: Literal["diagonal", "square"] = "square"


# ---------------------------------------------------------------------------
# Factory outcome
# ---------------------------------------------------------------------------


class PizzaNotFound(BaseModel):
    """Explicit "no such pizza" outcome of a store's factory method."""

    pizza_type: str
    style: PizzaStyle

    model_config = {"frozen": True}

    def __bool__(self) -> bool:
        return False


CreateResult = Pizza | PizzaNotFound


class PizzaOrder(BaseModel):
    pizza: Pizza
    steps: tuple[str, ...]

    model_config = {"frozen": True}


# ---------------------------------------------------------------------------
# API Request/Response Schemas
# ---------------------------------------------------------------------------


class PizzaRequest(BaseModel):
    pizza_type: str = Field(min_length=1, description="Pizza type identifier, e.g. 'cheese'")


class StoreMenu(BaseModel):
    style: PizzaStyle
    pizza_types: list[str]
