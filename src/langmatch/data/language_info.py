"""CLDR enhanced language matching data.

Pre-extracted from CLDR ``supplemental/languageInfo.xml``
(``<languageMatches type="written_new">``) and the Americas subtree of
``supplemental/supplementalData.xml`` territory containment.

Shapes (consumed by ``MatchTable.from_data``):
    PARADIGM_LOCALES: BCP-47 identifiers, maximized at load time
    MATCH_VARIABLES: (id, value) with ``+``/``-`` separated region codes
    LANGUAGE_MATCHES: (desired, supported, distance, oneway), CLDR units,
        patterns use ``_`` separators, ``*`` wildcards and ``$``/``$!`` variables
    TERRITORY_CONTAINMENT: macro-region -> directly contained codes

Rule order matters: within a level and specificity rank, earlier rules win.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "CLDR_VERSION",
    "LANGUAGE_MATCHES",
    "MATCH_VARIABLES",
    "PARADIGM_LOCALES",
    "TERRITORY_CONTAINMENT",
]

CLDR_VERSION: str = "44"

PARADIGM_LOCALES: tuple[str, ...] = ("en", "en-GB", "es", "es-419", "pt-BR", "pt-PT")

MATCH_VARIABLES: tuple[tuple[str, str], ...] = (
    ("$enUS", "AS+CA+GU+MH+MP+PH+PR+UM+US+VI"),
    ("$cnsar", "HK+MO"),
    ("$americas", "019"),
    ("$maghreb", "MA+DZ+TN+LY+MR+EH"),
)

# fmt: off
LANGUAGE_MATCHES: tuple[tuple[str, str, int, bool], ...] = (
    # ------------------------------------------------------------------
    # Language level
    # ------------------------------------------------------------------
    ("nb", "no", 1, False),
    ("hr", "bs", 4, False),
    ("sh", "bs", 4, False),
    ("sr", "bs", 4, False),
    ("sh", "hr", 4, False),
    ("sr", "hr", 4, False),
    ("sh", "sr", 4, False),
    ("ssy", "aa", 4, False),
    ("gsw", "de", 4, True),
    ("lb", "de", 4, True),
    ("da", "no", 8, False),
    ("da", "nb", 8, False),
    # Fallback languages for speakers of smaller languages
    ("ab", "ru", 30, True),
    ("ach", "en", 30, True),
    ("af", "nl", 20, True),
    ("ak", "en", 30, True),
    ("am", "en", 30, True),
    ("ay", "es", 20, True),
    ("az", "ru", 30, True),
    ("be", "ru", 20, True),
    ("bem", "en", 30, True),
    ("bh", "hi", 30, True),
    ("bn", "en", 30, True),
    ("bo", "zh", 20, True),
    ("br", "fr", 20, True),
    ("ca", "es", 20, True),
    ("ceb", "fil", 30, True),
    ("chr", "en", 20, True),
    ("ckb", "ar", 30, True),
    ("co", "fr", 20, True),
    ("crs", "fr", 20, True),
    ("cs", "sk", 20, False),
    ("cy", "en", 20, True),
    ("ee", "en", 30, True),
    ("eo", "en", 30, True),
    ("et", "fi", 30, True),
    ("eu", "es", 20, True),
    ("fo", "da", 20, True),
    ("fy", "nl", 20, True),
    ("ga", "en", 20, True),
    ("gaa", "en", 30, True),
    ("gd", "en", 20, True),
    ("gl", "es", 20, True),
    ("gn", "es", 20, True),
    ("gu", "hi", 30, True),
    ("ha", "en", 30, True),
    ("haw", "en", 20, True),
    ("ht", "fr", 20, True),
    ("hy", "ru", 30, True),
    ("ia", "en", 30, True),
    ("ig", "en", 30, True),
    ("is", "en", 20, True),
    ("jv", "id", 20, True),
    ("ka", "en", 30, True),
    ("kg", "fr", 30, True),
    ("kk", "ru", 30, True),
    ("km", "en", 30, True),
    ("kn", "en", 30, True),
    ("kri", "en", 30, True),
    ("ku", "tr", 30, True),
    ("ky", "ru", 30, True),
    ("la", "it", 20, True),
    ("lg", "en", 30, True),
    ("ln", "fr", 30, True),
    ("lo", "en", 30, True),
    ("loz", "en", 30, True),
    ("lua", "fr", 30, True),
    ("mai", "hi", 20, True),
    ("mfe", "en", 30, True),
    ("mg", "fr", 30, True),
    ("mi", "en", 20, True),
    ("mk", "bg", 30, True),
    ("ml", "en", 30, True),
    ("mn", "ru", 30, True),
    ("mr", "hi", 30, True),
    ("ms", "id", 30, True),
    ("mt", "en", 30, True),
    ("my", "en", 30, True),
    ("ne", "en", 30, True),
    ("nn", "nb", 20, False),
    ("nn", "no", 20, False),
    ("nso", "en", 30, True),
    ("ny", "en", 30, True),
    ("nyn", "en", 30, True),
    ("oc", "fr", 20, True),
    ("om", "en", 30, True),
    ("or", "en", 30, True),
    ("pa", "en", 30, True),
    ("pcm", "en", 20, True),
    ("ps", "en", 30, True),
    ("qu", "es", 30, True),
    ("rm", "de", 20, True),
    ("rn", "en", 30, True),
    ("rw", "fr", 30, True),
    ("sa", "hi", 30, True),
    ("sd", "en", 30, True),
    ("si", "en", 30, True),
    ("sn", "en", 30, True),
    ("so", "en", 30, True),
    ("sq", "en", 30, True),
    ("st", "en", 30, True),
    ("su", "id", 20, True),
    ("sw", "en", 30, True),
    ("ta", "en", 30, True),
    ("te", "en", 30, True),
    ("tg", "ru", 30, True),
    ("ti", "en", 30, True),
    ("tk", "ru", 30, True),
    ("tlh", "en", 30, True),
    ("tn", "en", 30, True),
    ("to", "en", 30, True),
    ("tt", "ru", 30, True),
    ("tum", "en", 30, True),
    ("ug", "zh", 20, True),
    ("ur", "en", 30, True),
    ("uz", "ru", 30, True),
    ("wo", "fr", 30, True),
    ("xh", "en", 30, True),
    ("yi", "en", 30, True),
    ("yo", "en", 30, True),
    ("za", "zh", 20, True),
    ("zu", "en", 30, True),
    # Arabic varieties
    ("aao", "ar", 10, True),
    ("abh", "ar", 10, True),
    ("abv", "ar", 10, True),
    ("acm", "ar", 10, True),
    ("acq", "ar", 10, True),
    ("acw", "ar", 10, True),
    ("acx", "ar", 10, True),
    ("acy", "ar", 10, True),
    ("adf", "ar", 10, True),
    ("aeb", "ar", 10, True),
    ("aec", "ar", 10, True),
    ("afb", "ar", 10, True),
    ("ajp", "ar", 10, True),
    ("apc", "ar", 10, True),
    ("apd", "ar", 10, True),
    ("arq", "ar", 10, True),
    ("ars", "ar", 10, True),
    ("ary", "ar", 10, True),
    ("arz", "ar", 10, True),
    ("auz", "ar", 10, True),
    ("avl", "ar", 10, True),
    ("ayh", "ar", 10, True),
    ("ayl", "ar", 10, True),
    ("ayn", "ar", 10, True),
    ("ayp", "ar", 10, True),
    ("bbz", "ar", 10, True),
    ("pga", "ar", 10, True),
    ("shu", "ar", 10, True),
    ("ssh", "ar", 10, True),
    # Chinese varieties
    ("cdo", "zh", 10, True),
    ("cjy", "zh", 10, True),
    ("cpx", "zh", 10, True),
    ("czh", "zh", 10, True),
    ("czo", "zh", 10, True),
    ("gan", "zh", 10, True),
    ("hak", "zh", 10, True),
    ("hsn", "zh", 10, True),
    ("lzh", "zh", 10, True),
    ("mnp", "zh", 10, True),
    ("nan", "zh", 10, True),
    ("wuu", "zh", 10, True),
    ("yue", "zh", 10, True),
    # Persian, Swahili, Estonian, Konkani varieties
    ("pes", "fa", 10, True),
    ("prs", "fa", 10, True),
    ("swc", "sw", 10, True),
    ("swh", "sw", 10, True),
    ("ekk", "et", 10, True),
    ("vro", "et", 10, True),
    ("gom", "kok", 10, True),
    ("knn", "kok", 10, True),
    # Malay varieties
    ("zlm", "ms", 10, True),
    ("zsm", "ms", 10, True),
    ("btj", "ms", 10, True),
    ("bve", "ms", 10, True),
    ("bvu", "ms", 10, True),
    ("coa", "ms", 10, True),
    ("dup", "ms", 10, True),
    ("hji", "ms", 10, True),
    ("jak", "ms", 10, True),
    ("jax", "ms", 10, True),
    ("kvb", "ms", 10, True),
    ("kvr", "ms", 10, True),
    ("kxd", "ms", 10, True),
    ("lce", "ms", 10, True),
    ("lcf", "ms", 10, True),
    ("liw", "ms", 10, True),
    ("max", "ms", 10, True),
    ("meo", "ms", 10, True),
    ("mfa", "ms", 10, True),
    ("mfb", "ms", 10, True),
    ("min", "ms", 10, True),
    ("mqg", "ms", 10, True),
    ("msi", "ms", 10, True),
    ("mui", "ms", 10, True),
    ("orn", "ms", 10, True),
    ("ors", "ms", 10, True),
    ("pel", "ms", 10, True),
    ("pse", "ms", 10, True),
    ("tmw", "ms", 10, True),
    ("urk", "ms", 10, True),
    ("vkk", "ms", 10, True),
    ("vkt", "ms", 10, True),
    ("xmm", "ms", 10, True),
    ("zmi", "ms", 10, True),
    ("*", "*", 80, False),
    # ------------------------------------------------------------------
    # Script level
    # ------------------------------------------------------------------
    ("am_Ethi", "en_Latn", 10, True),
    ("az_Latn", "ru_Cyrl", 10, True),
    ("bn_Beng", "en_Latn", 10, True),
    ("bo_Tibt", "zh_Hans", 10, True),
    ("hy_Armn", "ru_Cyrl", 10, True),
    ("ka_Geor", "en_Latn", 10, True),
    ("km_Khmr", "en_Latn", 10, True),
    ("kn_Knda", "en_Latn", 10, True),
    ("lo_Laoo", "en_Latn", 10, True),
    ("ml_Mlym", "en_Latn", 10, True),
    ("my_Mymr", "en_Latn", 10, True),
    ("ne_Deva", "en_Latn", 10, True),
    ("or_Orya", "en_Latn", 10, True),
    ("pa_Guru", "en_Latn", 10, True),
    ("ps_Arab", "en_Latn", 10, True),
    ("sd_Arab", "en_Latn", 10, True),
    ("si_Sinh", "en_Latn", 10, True),
    ("ta_Taml", "en_Latn", 10, True),
    ("te_Telu", "en_Latn", 10, True),
    ("ti_Ethi", "en_Latn", 10, True),
    ("tk_Latn", "ru_Cyrl", 10, True),
    ("ur_Arab", "en_Latn", 10, True),
    ("uz_Latn", "ru_Cyrl", 10, True),
    ("yi_Hebr", "en_Latn", 10, True),
    ("sr_Latn", "sr_Cyrl", 5, False),
    ("za_Latn", "zh_Hans", 10, True),
    ("zh_Hans", "zh_Hant", 15, True),
    ("zh_Hant", "zh_Hans", 19, True),
    ("zh_Hani", "zh_Hans", 20, True),
    ("zh_Hani", "zh_Hant", 20, True),
    ("ja_Latn", "ja_Jpan", 5, True),
    ("ja_Hani", "ja_Jpan", 5, True),
    ("ja_Hira", "ja_Jpan", 5, True),
    ("ja_Kana", "ja_Jpan", 5, True),
    ("ja_Hrkt", "ja_Jpan", 5, True),
    ("ja_Hira", "ja_Hrkt", 5, True),
    ("ja_Kana", "ja_Hrkt", 5, True),
    ("ko_Hani", "ko_Kore", 5, True),
    ("ko_Hang", "ko_Kore", 5, True),
    ("ko_Jamo", "ko_Kore", 5, True),
    ("ko_Jamo", "ko_Hang", 5, True),
    ("*_*", "*_*", 50, False),
    # ------------------------------------------------------------------
    # Region level
    # ------------------------------------------------------------------
    ("ar_*_$maghreb", "ar_*_$maghreb", 4, False),
    ("ar_*_$!maghreb", "ar_*_$!maghreb", 4, False),
    ("ar_*_*", "ar_*_*", 5, False),
    ("en_*_$enUS", "en_*_$enUS", 4, False),
    ("en_*_$!enUS", "en_*_GB", 3, False),
    ("en_*_$!enUS", "en_*_$!enUS", 4, False),
    ("en_*_*", "en_*_*", 5, False),
    ("es_*_$americas", "es_*_$americas", 4, False),
    ("es_*_$!americas", "es_*_$!americas", 4, False),
    ("es_*_*", "es_*_*", 5, False),
    ("pt_*_$americas", "pt_*_$americas", 4, False),
    ("pt_*_$!americas", "pt_*_$!americas", 4, False),
    ("pt_*_*", "pt_*_*", 5, False),
    ("zh_Hant_$cnsar", "zh_Hant_$cnsar", 4, False),
    ("zh_Hant_$!cnsar", "zh_Hant_$!cnsar", 4, False),
    ("zh_Hant_*", "zh_Hant_*", 5, False),
    ("*_*_*", "*_*_*", 4, False),
)
# fmt: on

# UN M.49 containment, Americas subtree only (the macro-regions referenced
# by MATCH_VARIABLES). 419 and 003 are CLDR grouping containers.
TERRITORY_CONTAINMENT: dict[str, tuple[str, ...]] = {
    "019": ("021", "013", "029", "005", "419", "003"),
    "003": ("021", "013", "029"),
    "419": ("013", "029", "005"),
    "021": ("BM", "CA", "GL", "PM", "US"),
    "013": ("BZ", "CR", "GT", "HN", "MX", "NI", "PA", "SV"),
    "029": (
        "AG", "AI", "AW", "BB", "BL", "BQ", "BS", "CU", "CW", "DM", "DO", "GD", "GP",
        "HT", "JM", "KN", "KY", "LC", "MF", "MQ", "MS", "PR", "SX", "TC", "TT", "VC",
        "VG", "VI",
    ),
    "005": ("AR", "BO", "BR", "CL", "CO", "EC", "FK", "GF", "GY", "PE", "PY", "SR", "UY", "VE"),
}
