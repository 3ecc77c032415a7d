from domain.completion import CompletionClient
from domain.prompts import (
    DIFFICULTY_PROMPT,
    RECOMMENDATION_PROMPT,
    SUBSTITUTIONS_PROMPT,
    TRANSLATE_LIST_TO_SPANISH_PROMPT,
    TRANSLATE_TO_ENGLISH_PROMPT,
    TRANSLATE_TO_SPANISH_PROMPT,
)


def split_lines(text: str, strip: str | None = None) -> list[str]:
    lines = (line.strip(strip) for line in text.split("\n"))
    return [line for line in lines if line.strip()]


class LLMService:
    def __init__(self, completion: CompletionClient) -> None:
        self.completion = completion

    async def qa(self, q: str) -> str:
        return await self.completion.complete(q)

    async def translate_to_english(self, word: str) -> str:
        ans = await self.qa(TRANSLATE_TO_ENGLISH_PROMPT.format(word=word))
        return ans.strip().lower()

    async def translate_to_spanish(self, text: str) -> str:
        ans = await self.qa(TRANSLATE_TO_SPANISH_PROMPT.format(text=text))
        return ans.strip()

    async def translate_list_to_spanish(self, items: list[str]) -> list[str]:
        """One translated line per item is requested but not guaranteed."""
        ans = await self.qa(TRANSLATE_LIST_TO_SPANISH_PROMPT.format(items="\n".join(items)))
        return split_lines(ans)

    async def classify_difficulty(self, instructions: str) -> str:
        ans = await self.qa(DIFFICULTY_PROMPT.format(instructions=instructions))
        return ans.strip()

    async def recommend(self, recipe_name: str, goal: str) -> str:
        msg = RECOMMENDATION_PROMPT.format(recipe_name=recipe_name, goal=goal)
        ans = await self.qa(msg)
        return ans.strip()

    async def suggest_substitutions(self, ingredients: list[str]) -> list[str]:
        msg = SUBSTITUTIONS_PROMPT.format(ingredients=", ".join(ingredients))
        ans = await self.qa(msg)
        return split_lines(ans, strip="- \r")
