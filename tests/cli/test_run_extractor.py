import io
import json
import tempfile
import unittest
import sys
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from scripts.run_extractor import main

RECIPE_HTML = (
    '<div class="wprm-recipe-container"><h2 class="wprm-recipe-name">Pancakes</h2>'
    '<ul class="wprm-recipe-ingredients">'
    '<li class="wprm-recipe-ingredient"><span class="wprm-recipe-ingredient-name">Flour</span></li>'
    '<li class="wprm-recipe-ingredient"><span class="wprm-recipe-ingredient-name">Milk</span></li>'
    '</ul></div>'
)


class TestRunExtractor(unittest.TestCase):
    """Тесты для CLI скрипта"""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.html_path = Path(self.tmp.name) / "pancakes.html"
        self.html_path.write_text(RECIPE_HTML, encoding='utf-8')

    def test_print_ingredients(self):
        out = io.StringIO()
        with redirect_stdout(out):
            code = main([str(self.html_path), '--print-ingredients'])

        self.assertEqual(code, 0)
        self.assertEqual(out.getvalue(), "Flour\nMilk\n")

    def test_write_json(self):
        output_path = Path(self.tmp.name) / "result.json"

        code = main([str(self.html_path), '--output', str(output_path)])

        self.assertEqual(code, 0)
        with open(output_path, encoding='utf-8') as f:
            data = json.load(f)
        self.assertEqual(data['dish_name'], "Pancakes")
        self.assertEqual([i['name'] for i in data['ingredients']], ["Flour", "Milk"])

    def test_not_a_recipe_exit_code(self):
        post = Path(self.tmp.name) / "post.html"
        post.write_text("<p>nothing here</p>", encoding='utf-8')

        self.assertEqual(main([str(post), '--output', str(Path(self.tmp.name) / "x.json")]), 1)
        self.assertEqual(main([str(post), '--print-ingredients']), 1)

    def test_missing_file_exit_code(self):
        missing = Path(self.tmp.name) / "missing.html"

        self.assertEqual(main([str(missing), '--output', str(Path(self.tmp.name) / "x.json")]), 1)
        self.assertEqual(main([str(missing), '--print-ingredients']), 1)

    def test_invalid_log_level(self):
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main([str(self.html_path), '--log-level', 'foo'])
        self.assertEqual(ctx.exception.code, 2)

    def test_log_level_is_case_insensitive(self):
        with redirect_stdout(io.StringIO()):
            code = main([str(self.html_path), '--print-ingredients', '--log-level', 'debug'])

        self.assertEqual(code, 0)


if __name__ == '__main__':
    unittest.main()
