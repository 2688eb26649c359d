import unittest
from kochbuch.domain.Image import Image
from kochbuch.domain.Ingredient import Ingredient
from kochbuch.domain.Recipe import Recipe
from kochbuch.utilities.validators import RecipeDataError

PANCAKES = {
    "id": 7,
    "name": "Pfannkuchen",
    "slug": "pfannkuchen",
    "categories": ["Frühstück", " ", "Süß"],
    "ingredients": [
        {"name": "Mehl", "amount": 200, "unit": "g"},
        {"name": "Milch", "amount": 300, "unit": "ml"},
        {"name": "Ei", "amount": 2, "unit": "Stück"},
    ],
    "images": [{"name": "pfannkuchen.jpg", "width": 800, "height": 600}],
    "description": "Alles verrühren und ausbacken.",
    "source": "Oma",
    "servings": 4,
}


class TestRecipe(unittest.TestCase):

    def setUp(self):
        self.recipe = Recipe.from_dict(PANCAKES)

    def test_from_dict(self):
        self.assertEqual(self.recipe.id, 7)
        self.assertEqual(self.recipe.categories, ("Frühstück", "Süß"))
        self.assertEqual(self.recipe.ingredients[0], Ingredient("Mehl", 200, "g"))
        self.assertEqual(self.recipe.images, (Image("pfannkuchen.jpg", 800, 600),))

    def test_to_dict_round_trip_shape(self):
        data = self.recipe.to_dict()
        self.assertEqual(data["ingredients"], PANCAKES["ingredients"])
        self.assertEqual(data["categories"], ["Frühstück", "Süß"])
        self.assertEqual(Recipe.from_dict(data), self.recipe)

    def test_has_category(self):
        self.assertTrue(self.recipe.has_category("Süß"))
        self.assertFalse(self.recipe.has_category("Hauptgericht"))

    def test_replace_returns_new_recipe(self):
        changed = self.recipe.replace(ingredients=[Ingredient("Mehl", 250, "g")])
        self.assertEqual(len(changed.ingredients), 1)
        self.assertEqual(len(self.recipe.ingredients), 3)
        self.assertEqual(changed.slug, "pfannkuchen")
        with self.assertRaises(TypeError):
            self.recipe.replace(colour="blue")

    def test_from_dict_rejects_infinite_amount(self):
        data = dict(PANCAKES, ingredients=[{"name": "Mehl", "amount": "inf", "unit": "g"}])
        with self.assertRaises(RecipeDataError):
            Recipe.from_dict(data)
        data = dict(PANCAKES, ingredients=[{"name": "Mehl", "amount": float("nan"), "unit": "g"}])
        with self.assertRaises(RecipeDataError):
            Recipe.from_dict(data)

    def test_from_dict_keeps_long_units(self):
        data = dict(PANCAKES, ingredients=[{"name": "Mehl", "amount": 1, "unit": "Packung(en) à 500 Gramm"}])
        self.assertEqual(Recipe.from_dict(data).ingredients[0].unit, "Packung(en) à 500 Gramm")

    def test_from_dict_requires_name(self):
        with self.assertRaises(RecipeDataError) as ctx:
            Recipe.from_dict({"slug": "ohne-name"})
        self.assertTrue(ctx.exception.errors)


if __name__ == '__main__':
    unittest.main()
