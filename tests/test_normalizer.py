from services import normalize, normalize_ingredient_name, resolve_core, resolve_terms, is_always_available


def test_strips_quantity_unit_and_descriptors():
    assert normalize("2 tbsp finely chopped fresh garlic").cleaned == "garlic"


def test_bare_word_keeps_unit_like_letters():
    assert normalize("garlic").cleaned == "garlic"
    assert normalize("2 garlic cloves").cleaned == "garlic cloves"


def test_longest_unit_wins():
    assert normalize("3 tablespoons olive oil").cleaned == "olive oil"
    assert normalize("2 teaspoons vanilla").cleaned == "vanilla"


def test_unit_glued_to_number():
    assert normalize("400g minced beef").cleaned == "beef"


def test_number_without_unit():
    # "l" of "large" is not a liter
    assert normalize("2 large eggs").cleaned == "eggs"


def test_bullets_and_fractions():
    assert normalize("• 2 large eggs").cleaned == "eggs"
    assert normalize("- 1/2 cup milk").cleaned == "milk"
    assert normalize("½ cup milk").cleaned == "milk"
    assert normalize("1 1/2 cups sugar").cleaned == "sugar"
    assert normalize("1½ cups sugar").cleaned == "sugar"


def test_inline_quantities():
    result = normalize("1 lb chicken 2 cups rice")
    assert result.cleaned == "chicken rice"
    assert result.words == ("chicken", "rice")


def test_punctuation_becomes_space():
    assert normalize("1 cup tomatoes, diced").cleaned == "tomatoes"
    assert normalize("all-purpose flour").cleaned == "all-purpose flour"


def test_descriptors_use_word_boundaries():
    assert normalize("redcurrant jelly").cleaned == "redcurrant jelly"
    assert normalize("shredded cheese").cleaned == "cheese"


def test_lowercases():
    assert normalize("Fresh BASIL").cleaned == "basil"


def test_short_words_dropped_from_words():
    result = normalize("cream of tartar")
    assert result.cleaned == "cream of tartar"
    assert result.words == ("cream", "tartar")


def test_empty_input():
    assert normalize("") == ("", ())
    assert normalize("   ") == ("", ())
    assert normalize(None) == ("", ())
    assert normalize("2 cups").cleaned == ""


def test_normalize_is_idempotent():
    phrases = [
        "2 tbsp finely chopped fresh garlic",
        "large 2 eggs",
        "1 lb chicken 2 cups rice",
        "• ½ cup (packed) brown sugar",
        "Salt & pepper, to taste",
        "",
    ]
    for phrase in phrases:
        once = normalize(phrase)
        assert normalize(once.cleaned) == once, phrase


def test_normalize_ingredient_name():
    assert normalize_ingredient_name("3 ripe bananas") == "bananas"


def test_resolve_core_uses_head_noun():
    assert resolve_core("2 cups chopped scallions") == "onion"
    assert resolve_core("saffron") == "saffron"


def test_resolve_core_falls_back_to_whole_phrase():
    assert resolve_core("3 garlic cloves") == "garlic"
    assert resolve_core("2 tbsp lemon juice") == "lemon"


def test_resolve_core_empty():
    assert resolve_core("") == ""


def test_resolve_terms():
    assert resolve_terms("bell peppers") == {"bell peppers", "bell", "peppers", "pepper"}
    assert resolve_terms("") == frozenset()


def test_staples():
    assert is_always_available("salt")
    assert is_always_available(" Sea Salt ")
    assert is_always_available("2 tbsp olive oil")
    assert is_always_available("water")
    assert not is_always_available("saffron")
    assert not is_always_available("")
    assert not is_always_available(None)


def test_qualifier_words_are_not_staples():
    assert is_always_available("extra virgin olive oil")
    assert is_always_available("freshly ground black pepper")
    assert not is_always_available("olive")
    assert not is_always_available("vegetable")
    assert not is_always_available("table")
    assert not is_always_available("aubergine")


def test_quantity_ranges():
    assert normalize("2-3 cloves garlic").cleaned == "cloves garlic"
