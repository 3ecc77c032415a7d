"""Prompts for the completion service. Answers are expected in neutral Spanish."""

TRANSLATE_TO_ENGLISH_PROMPT = """
Traduce el siguiente ingrediente al inglés.
Responde solo con la palabra traducida, sin explicación:

{word}
""".strip()


TRANSLATE_TO_SPANISH_PROMPT = """
Traduce el siguiente texto al español.
Devuelve únicamente la traducción.
No agregues explicaciones.
No agregues notas.
No agregues frases como 'Aquí está la traducción'.
No agregues comillas.

Texto:
{text}
""".strip()


TRANSLATE_LIST_TO_SPANISH_PROMPT = """
Traduce cada elemento al español.
Devuelve solo la lista traducida.
Una línea por elemento.
Sin explicaciones.
Sin notas adicionales.

Lista:
{items}
""".strip()


DIFFICULTY_PROMPT = """
Analiza las siguientes instrucciones de cocina y clasifica la dificultad como:

Fácil
Media
Difícil

Responde SOLO con una palabra en español.

Instrucciones:
{instructions}
""".strip()


RECOMMENDATION_PROMPT = """
La receta se llama "{recipe_name}".
El objetivo del usuario es: "{goal}".

Genera una recomendación breve, clara y útil.
Responde únicamente en español neutro.
Máximo 3 líneas.
""".strip()


SUBSTITUTIONS_PROMPT = """
Sugiere sustituciones para los siguientes ingredientes:
{ingredients}

Reglas:
- Máximo 5 sustituciones
- Una por línea
- Español neutro
- No agregues explicaciones largas
""".strip()
