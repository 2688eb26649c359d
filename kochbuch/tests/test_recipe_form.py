import unittest
from kochbuch.domain.Image import Image
from kochbuch.domain.Ingredient import Ingredient
from kochbuch.domain.Recipe import Recipe
from kochbuch.logic.editing.recipe_form import (
    add_category, add_image, is_submittable, missing_required_fields, remove_category, remove_image
)
from kochbuch.logic.editing.results import EditOutcome


class TestCategories(unittest.TestCase):

    def test_add_and_remove(self):
        result = add_category(("Suppe",), " Vegetarisch ")
        self.assertTrue(result.applied)
        self.assertEqual(result.items, ("Suppe", "Vegetarisch"))
        self.assertEqual(remove_category(result.items, "Suppe").items, ("Vegetarisch",))

    def test_rejections(self):
        self.assertEqual(add_category(("Suppe",), "Suppe").outcome, EditOutcome.DUPLICATE)
        self.assertEqual(add_category(("Suppe",), "  ").outcome, EditOutcome.INVALID)
        self.assertEqual(add_category(("Suppe",), None).outcome, EditOutcome.INVALID)
        self.assertEqual(remove_category(("Suppe",), "Kuchen").outcome, EditOutcome.NOT_FOUND)


class TestImages(unittest.TestCase):

    def setUp(self):
        self.current = (Image("alt.jpg", 640, 480),)

    def test_default_limit_replaces_current_image(self):
        result = add_image(self.current, Image("neu.jpg", 800, 600))
        self.assertTrue(result.applied)
        self.assertEqual([i.name for i in result.items], ["neu.jpg"])

    def test_larger_limit_appends_and_drops_oldest(self):
        two = add_image(self.current, Image("b.jpg"), max_images=2).items
        self.assertEqual([i.name for i in two], ["alt.jpg", "b.jpg"])
        three = add_image(two, Image("c.jpg"), max_images=2).items
        self.assertEqual([i.name for i in three], ["b.jpg", "c.jpg"])

    def test_same_name_rejected(self):
        result = add_image(self.current, Image("alt.jpg", 1024, 768))
        self.assertEqual(result.outcome, EditOutcome.DUPLICATE)
        self.assertEqual(result.items, self.current)
        self.assertEqual(add_image(self.current, Image("")).outcome, EditOutcome.INVALID)

    def test_remove_by_name(self):
        self.assertEqual(remove_image(self.current, "alt.jpg").items, ())
        self.assertEqual(remove_image(self.current, "fehlt.jpg").outcome, EditOutcome.NOT_FOUND)


class TestRequiredFields(unittest.TestCase):

    def test_complete_recipe(self):
        recipe = Recipe(id=1, name="Gulasch", slug="gulasch", categories=["Hauptgericht"],
                        ingredients=[Ingredient("Rindfleisch", 1, "kg")],
                        description="Schmoren.", source="Kochbuch", servings=4)
        self.assertEqual(missing_required_fields(recipe), [])
        self.assertTrue(is_submittable(recipe))

    def test_reports_empty_fields_in_order(self):
        recipe = Recipe(id=1, name="Gulasch", slug="gulasch", description="  ", servings=0)
        self.assertEqual(missing_required_fields(recipe),
                         ["servings", "description", "source", "ingredients", "categories"])
        self.assertFalse(is_submittable(recipe))


if __name__ == '__main__':
    unittest.main()
