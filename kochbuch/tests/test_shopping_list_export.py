import unittest
from kochbuch.domain.Ingredient import Ingredient
from kochbuch.domain.ShoppingList import ShoppingList, format_amount
from kochbuch.infra.pdf_utils import generate_pdf_for_shopping_list


class TestShoppingListExport(unittest.TestCase):

    def setUp(self):
        self.shopping = ShoppingList([
            Ingredient("Äpfel", 3, "Stück"),
            Ingredient("Butter", 12.5, "g"),
            Ingredient("Milch", 0.5, "l"),
        ])

    def test_format_amount(self):
        self.assertEqual(format_amount(2.0), "2")
        self.assertEqual(format_amount(0.5), "0.5")
        self.assertEqual(format_amount(1 / 3), "0.33")
        self.assertEqual(format_amount(None), "")

    def test_to_text(self):
        self.assertEqual(
            self.shopping.to_text(title="Einkauf"),
            "Einkauf\n\n3 Stück Äpfel\n12.5 g Butter\n0.5 l Milch",
        )
        self.assertEqual(self.shopping.to_text(title=""), "3 Stück Äpfel\n12.5 g Butter\n0.5 l Milch")
        self.assertEqual(ShoppingList().to_text(title="Einkauf"), "Einkauf")

    def test_pdf_bytes(self):
        pdf = generate_pdf_for_shopping_list(self.shopping, title="Einkauf & Co")
        self.assertTrue(pdf.startswith(b"%PDF"))
        self.assertTrue(generate_pdf_for_shopping_list(ShoppingList()).startswith(b"%PDF"))


if __name__ == '__main__':
    unittest.main()
