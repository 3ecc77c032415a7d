"""Describes the CookIA domain. Centres around `generate_recipe`.

Why is this hard?

- It mostly is not. Two third-party apis glued together.
- TheMealDB finds the recipe, a language model translates and enriches it.
- Every step needs the answer to the previous one, so nothing runs in parallel.
- Nothing is stored. A request comes in, a recipe goes out.

Both apis sit behind httpx clients so they can be faked in tests.
"""
