"""
Built-in Spanish -> English glossary used when storing ranked vocabulary
"""

COMMON_TRANSLATIONS = {
    'bailar': 'to dance',
    'corazón': 'heart',
    'amor': 'love',
    'vida': 'life',
    'canción': 'song',
    'noche': 'night',
    'día': 'day',
    'tiempo': 'time',
    'mundo': 'world',
    'gente': 'people',
    'casa': 'house',
    'mano': 'hand',
    'ojos': 'eyes',
    'agua': 'water',
    'tierra': 'earth',
    'fuego': 'fire',
    'aire': 'air',
    'cielo': 'sky',
    'sol': 'sun',
    'luna': 'moon',
    'estrella': 'star',
    'mar': 'sea',
    'río': 'river',
    'montaña': 'mountain',
    'árbol': 'tree',
    'flor': 'flower',
    'camino': 'path',
    'ciudad': 'city',
    'país': 'country',
    'amigo': 'friend',
    'familia': 'family',
    'hijo': 'son',
    'hija': 'daughter',
    'madre': 'mother',
    'padre': 'father',
    'hermano': 'brother',
    'hermana': 'sister',
    'trabajo': 'work',
    'escuela': 'school',
    'libro': 'book',
    'música': 'music',
    'comida': 'food',
    'bebida': 'drink',
    'cuerpo': 'body',
    'alma': 'soul',
    'mente': 'mind',
    'sueño': 'dream',
    'esperanza': 'hope',
    'miedo': 'fear',
    'alegría': 'joy',
    'tristeza': 'sadness',
    'felicidad': 'happiness',
    'dolor': 'pain',
    'risa': 'laughter',
    'llanto': 'crying',
    'beso': 'kiss',
    'abrazo': 'hug',
    'palabra': 'word',
    'voz': 'voice',
    'silencio': 'silence',
    'ruido': 'noise',
    'color': 'color',
    'luz': 'light',
    'sombra': 'shadow',
    'verdad': 'truth',
    'mentira': 'lie',
    'belleza': 'beauty',
    'fuerza': 'strength',
    'debilidad': 'weakness',
    'guerra': 'war',
    'paz': 'peace',
    'libertad': 'freedom',
    'destino': 'destiny',
    'caminar': 'to walk',
    'correr': 'to run',
    'saltar': 'to jump',
    'volar': 'to fly',
    'nadar': 'to swim',
    'dormir': 'to sleep',
    'despertar': 'to wake up',
    'comer': 'to eat',
    'beber': 'to drink',
    'hablar': 'to speak',
    'escuchar': 'to listen',
    'mirar': 'to look',
    'tocar': 'to touch',
    'sentir': 'to feel',
    'pensar': 'to think',
    'amar': 'to love',
    'odiar': 'to hate',
    'reír': 'to laugh',
    'llorar': 'to cry',
    'cantar': 'to sing',
    'jugar': 'to play',
    'trabajar': 'to work',
    'estudiar': 'to study',
    'aprender': 'to learn',
    'enseñar': 'to teach',
    'leer': 'to read',
    'escribir': 'to write',
    'dibujar': 'to draw',
    'pintar': 'to paint',
    'cocinar': 'to cook',
    'limpiar': 'to clean',
    'comprar': 'to buy',
    'vender': 'to sell',
    'pagar': 'to pay',
    'ganar': 'to win/earn',
    'perder': 'to lose',
    'buscar': 'to search',
    'encontrar': 'to find',
    'olvidar': 'to forget',
    'recordar': 'to remember',
    'empezar': 'to start',
    'terminar': 'to finish',
    'continuar': 'to continue',
    'parar': 'to stop',
    'esperar': 'to wait/hope',
    'ayudar': 'to help',
    'necesitar': 'to need',
    'desear': 'to wish',
    'gustar': 'to like',
    'preferir': 'to prefer',
}


def translate_word(word: str) -> str:
    """Glossary translation, or the word itself when it is not listed."""
    return COMMON_TRANSLATIONS.get(word.lower(), word)
