import unittest
from kochbuch.domain.Ingredient import Ingredient
from kochbuch.utilities.validators import RecipeDataError


class TestIngredient(unittest.TestCase):

    def test_key_ignores_amount(self):
        self.assertEqual(Ingredient("Mehl", 200, "g").key, Ingredient("Mehl", 300, "g").key)
        self.assertNotEqual(Ingredient("Mehl", 200, "g").key, Ingredient("Mehl", 1, "kg").key)

    def test_value_equality(self):
        self.assertEqual(Ingredient("Salz", 1, "Prise(n)"), Ingredient("Salz", 1, "Prise(n)"))
        self.assertNotEqual(Ingredient("Salz", 1, "Prise(n)"), Ingredient("Salz", 2, "Prise(n)"))
        self.assertEqual(len({Ingredient("Ei", 2, "Stück"), Ingredient("Ei", 2, "Stück")}), 1)

    def test_from_dict_strips_and_ignores_unknown_keys(self):
        ing = Ingredient.from_dict({"name": " Milch ", "amount": 250, "unit": "ml", "note": "fresh"})
        self.assertEqual(ing, Ingredient("Milch", 250, "ml"))
        self.assertEqual(ing.to_dict(), {"name": "Milch", "amount": 250, "unit": "ml"})

    def test_from_dict_missing_amount_is_zero(self):
        self.assertEqual(Ingredient.from_dict({"name": "Pfeffer", "unit": "g"}).amount, 0)
        self.assertEqual(Ingredient.from_dict({"name": "Pfeffer", "amount": None, "unit": "g"}).amount, 0)

    def test_from_dict_rejects_malformed_record(self):
        with self.assertRaises(RecipeDataError):
            Ingredient.from_dict({"amount": 2, "unit": "g"})
        with self.assertRaises(ValueError):
            Ingredient.from_dict({"name": "Zucker", "amount": -5, "unit": "g"})


if __name__ == '__main__':
    unittest.main()
