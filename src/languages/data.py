"""Static table of supported languages.

Row layout: ``LanguageRow(name, three_letter_iso_name, english_name, [full_name],
[google_name], [hunspell_name], [tesseract_name])``.

- ``name``: ``language[-script][-region]`` (BCP 47 style), optionally followed by
  ``:variant`` for alternative dictionaries of the same locale.
- ``three_letter_iso_name``: ISO 639-2 code.
- ``english_name``: used when the CLDR data has no name for ``name``.
- ``full_name``: ``language[-script]_region``; give it for neutral languages
  only. Territory locales derive it from ``name``.
- ``google_name``: Google Translate API language code.
- ``hunspell_name``: dictionary file name without extension.
- ``tesseract_name``: traineddata name from the tesseract-ocr tessdata
  repository (``eng``, ``chi_sim``, ``srp_latn``), given for neutral
  languages with a trained model.
"""

from __future__ import annotations

from typing import NamedTuple


class LanguageRow(NamedTuple):
    name: str
    three_letter_iso_name: str
    english_name: str
    full_name: str | None = None
    google_name: str | None = None
    hunspell_name: str | None = None
    tesseract_name: str | None = None


LANGUAGE_ROWS: tuple[LanguageRow, ...] = (
    LanguageRow("af", "afr", "Afrikaans", "af_ZA", google_name="af", hunspell_name="af_ZA", tesseract_name="afr"),
    LanguageRow("ach", "ach", "Acholi", "ach_UG"),
    LanguageRow("ak", "aka", "Akan", "ak_GH", hunspell_name="ak_GH"),
    LanguageRow("am", "amh", "Amharic", "am_ET", hunspell_name="am_ET", tesseract_name="amh"),
    LanguageRow("an", "arg", "Aragonese", "an_ES", hunspell_name="an_ES"),
    LanguageRow("ar", "ara", "Arabic", "ar_EG", google_name="ar", hunspell_name="ar", tesseract_name="ara"),
    LanguageRow("arn", "arn", "Mapudungun", "arn_CL"),
    LanguageRow("as", "asm", "Assamese", "as_IN", hunspell_name="as-IN", tesseract_name="asm"),
    LanguageRow("ast", "ast", "Asturian", "ast_ES", hunspell_name="ast"),
    LanguageRow("az-Arab", "aze", "Azeri (Arabic)", "az-Arab_IR"),
    LanguageRow("az-Cyrl", "aze", "Azeri (Cyrillic)", "az-Cyrl_RU", tesseract_name="aze_cyrl"),
    LanguageRow("az-Latn", "aze", "Azeri (Latin)", "az-Latn_AZ", google_name="az", hunspell_name="az-Latn-AZ", tesseract_name="aze"),
    LanguageRow("ba", "bak", "Bashkir", "ba_RU"),
    LanguageRow("bas", "bas", "Basaa", "bas_CM"),
    LanguageRow("be", "bel", "Belarusian", "be_BY", google_name="be", hunspell_name="be", tesseract_name="bel"),
    LanguageRow("bem", "bem", "Bemba", "bem_ZM"),
    LanguageRow("bg", "bul", "Bulgarian", "bg_BG", google_name="bg", hunspell_name="bg", tesseract_name="bul"),
    LanguageRow("bm", "bam", "Bambara", "bm_ML"),
    LanguageRow("bn", "ben", "Bengali", "bn_BD", google_name="bn", hunspell_name="bn-BD", tesseract_name="ben"),
    LanguageRow("bo", "bod", "Tibetan", "bo_CN", tesseract_name="bod"),
    LanguageRow("br", "bre", "Breton", "br_FR", hunspell_name="br", tesseract_name="bre"),
    LanguageRow("bs-Cyrl", "bsc", "Bosnian (Cyrillic)", "bs-Cyrl_BA"),
    LanguageRow("bs-Latn", "bsb", "Bosnian (Latin)", "bs-Latn_BA", google_name="bs", tesseract_name="bos"),
    LanguageRow("ca", "cat", "Catalan", "ca_ES", google_name="ca", hunspell_name="ca", tesseract_name="cat"),
    LanguageRow("ca:valencia [AVL]", "cat", "Catalan", "ca_ES", hunspell_name="ca-ES-valencia"),
    LanguageRow("ca:valencia [RACV]", "cat", "Catalan", "ca_ES", hunspell_name="roa-ES-val"),
    LanguageRow("ceb", "ceb", "Cebuano", "ceb_PH", google_name="ceb", tesseract_name="ceb"),
    LanguageRow("chr", "chr", "Cherokee", "chr_US", tesseract_name="chr"),
    LanguageRow("co", "cos", "Corsican", "co_FR", tesseract_name="cos"),
    LanguageRow("cs", "ces", "Czech", "cs_CZ", google_name="cs", hunspell_name="cs_CZ", tesseract_name="ces"),
    LanguageRow("cy", "cym", "Welsh", "cy_GB", google_name="cy", tesseract_name="cym"),
    LanguageRow("da", "dan", "Danish", "da_DK", google_name="da", hunspell_name="da_DK", tesseract_name="dan"),
    LanguageRow("de", "deu", "German", "de_DE", google_name="de", tesseract_name="deu"),
    LanguageRow("de-AT", "deu", "German (Austria)", hunspell_name="de_AT"),
    LanguageRow("de-CH", "deu", "German (Switzerland)", hunspell_name="de_CH"),
    LanguageRow("de-DE", "deu", "German (Germany)", hunspell_name="de_DE"),
    LanguageRow("dsb", "dsb", "Lower Sorbian", "dsb_DE"),
    LanguageRow("hsb", "hsb", "Upper Sorbian", "hsb_DE"),
    LanguageRow("dv", "div", "Divehi", "dv_MV", tesseract_name="div"),
    LanguageRow("ee", "ewe", "Ewe", "ee_GH", hunspell_name="ee-GH"),
    LanguageRow("el", "ell", "Greek", "el_GR", google_name="el", hunspell_name="el-GR", tesseract_name="ell"),
    LanguageRow("en", "eng", "English", "en_US", google_name="en", tesseract_name="eng"),
    LanguageRow("en-AU", "eng", "English (Australia)", hunspell_name="en_AU"),
    LanguageRow("en-CA", "eng", "English (Canada)", hunspell_name="en_CA"),
    LanguageRow("en-GB", "eng", "English (United Kingdom)", hunspell_name="en_GB"),
    LanguageRow("en-NZ", "eng", "English (New Zealand)", hunspell_name="en_NZ"),
    LanguageRow("en-US", "eng", "English (United States)", hunspell_name="en_US"),
    LanguageRow("en-ZA", "eng", "English (South Africa)", hunspell_name="en_ZA"),
    LanguageRow("eo", "epo", "Esperanto", "eo_001", google_name="eo", hunspell_name="eo-EO", tesseract_name="epo"),
    LanguageRow("es", "spa", "Spanish", "es_ES", google_name="es", tesseract_name="spa"),
    LanguageRow("es-AR", "spa", "Spanish (Argentina)", hunspell_name="es_AR"),
    LanguageRow("es-BO", "spa", "Spanish (Bolivia)", hunspell_name="es_BO"),
    LanguageRow("es-CL", "spa", "Spanish (Chile)", hunspell_name="es_CL"),
    LanguageRow("es-CO", "spa", "Spanish (Colombia)", hunspell_name="es_CO"),
    LanguageRow("es-CR", "spa", "Spanish (Costa Rica)", hunspell_name="es_CR"),
    LanguageRow("es-DO", "spa", "Spanish (Dominican Republic)", hunspell_name="es_DO"),
    LanguageRow("es-EC", "spa", "Spanish (Ecuador)", hunspell_name="es_EC"),
    LanguageRow("es-ES", "spa", "Spanish (Spain)", hunspell_name="es_ES"),
    LanguageRow("es-GT", "spa", "Spanish (Guatemala)", hunspell_name="es_GT"),
    LanguageRow("es-HN", "spa", "Spanish (Honduras)", hunspell_name="es_HN"),
    LanguageRow("es-MX", "spa", "Spanish (Mexico)", hunspell_name="es_MX"),
    LanguageRow("es-NI", "spa", "Spanish (Nicaragua)", hunspell_name="es_NI"),
    LanguageRow("es-PA", "spa", "Spanish (Panama)", hunspell_name="es_PA"),
    LanguageRow("es-PE", "spa", "Spanish (Peru)", hunspell_name="es_PE"),
    LanguageRow("es-PR", "spa", "Spanish (Puerto Rico)", hunspell_name="es_PR"),
    LanguageRow("es-PY", "spa", "Spanish (Paraguay)", hunspell_name="es_PY"),
    LanguageRow("es-SV", "spa", "Spanish (El Salvador)", hunspell_name="es_SV"),
    LanguageRow("es-US", "spa", "Spanish (United States)", hunspell_name="es_US"),
    LanguageRow("es-UY", "spa", "Spanish (Uruguay)", hunspell_name="es_UY"),
    LanguageRow("es-VE", "spa", "Spanish (Venezuela)", hunspell_name="es_VE"),
    LanguageRow("et", "est", "Estonian", "et_EE", google_name="et", hunspell_name="et-EE", tesseract_name="est"),
    LanguageRow("eu", "eus", "Basque", "eu_ES", google_name="eu", hunspell_name="eu", tesseract_name="eus"),
    LanguageRow("fa", "fas", "Persian", "fa_IR", google_name="fa", hunspell_name="fa_IR", tesseract_name="fas"),
    LanguageRow("fi", "fin", "Finnish", "fi_FI", google_name="fi", tesseract_name="fin"),
    LanguageRow("fi-FI", "fin", "Finnish (Finland)", hunspell_name="fi_FI"),
    LanguageRow("fil", "tgl", "Filipino", "tl_PH", google_name="tl", hunspell_name="tl_PH", tesseract_name="fil"),
    LanguageRow("fj", "fij", "Fijian", "fj_FJ"),
    LanguageRow("fo", "fao", "Faroese", "fo_FO", hunspell_name="fo_FO", tesseract_name="fao"),
    LanguageRow("fr", "fra", "French", "fr_FR", google_name="fr", hunspell_name="fr_FR", tesseract_name="fra"),
    LanguageRow("fur", "fur", "Friulian", "fur_IT", hunspell_name="fur-IT"),
    LanguageRow("fy", "fry", "Frisian", "fy_NL", hunspell_name="fy", tesseract_name="fry"),
    LanguageRow("ga", "gle", "Irish", "ga_IE", google_name="ga", hunspell_name="ga", tesseract_name="gle"),
    LanguageRow("gd", "gla", "Scottish Gaelic", "gd_GB", hunspell_name="gd-GB", tesseract_name="gla"),
    LanguageRow("gl", "glg", "Galician", "gl_ES", google_name="gl", hunspell_name="gl_ES", tesseract_name="glg"),
    LanguageRow("gsw", "gsw", "Alsatian", "gsw_FR"),
    LanguageRow("gu", "guj", "Gujarati", "gu_IN", google_name="gu", tesseract_name="guj"),
    LanguageRow("ha-Latn", "hau", "Hausa (Latin)", "ha-Latn_NG", google_name="ha"),
    LanguageRow("he", "heb", "Hebrew", "he_IL", google_name="iw", tesseract_name="heb"),
    LanguageRow("hi", "hin", "Hindi", "hi_IN", google_name="hi", tesseract_name="hin"),
    LanguageRow("hmn", "hmn", "Hmong", "hmn_LA", google_name="hmn", hunspell_name="hmn_LA"),
    LanguageRow("hr", "hrv", "Croatian", "hr_HR", google_name="hr", hunspell_name="hr-HR", tesseract_name="hrv"),
    LanguageRow("ht", "hat", "Haitian Creole", "ht_HT", google_name="ht", tesseract_name="hat"),
    LanguageRow("hu", "hun", "Hungarian", "hu_HU", google_name="hu", hunspell_name="hu_HU", tesseract_name="hun"),
    LanguageRow("hy", "hye", "Armenian", "hy_AM", google_name="hy", hunspell_name="hy_AM", tesseract_name="hye"),
    LanguageRow("ia", "ina", "Interlingua", "ia_001", hunspell_name="ia-ia"),
    LanguageRow("id", "ind", "Indonesian", "id_ID", google_name="id", tesseract_name="ind"),
    LanguageRow("ig", "ibo", "Igbo", "ig_NG", google_name="ig"),
    LanguageRow("ii", "iii", "Yi", "ii_CN"),
    LanguageRow("is", "isl", "Icelandic", "is_IS", google_name="is", hunspell_name="is_IS", tesseract_name="isl"),
    LanguageRow("it", "ita", "Italian", "it_IT", google_name="it", hunspell_name="it_IT", tesseract_name="ita"),
    LanguageRow("iu-Cans", "iku", "Inuktitut (Syllabics)", "iu-Cans_CA", tesseract_name="iku"),
    LanguageRow("iu-Latn", "iku", "Inuktitut (Latin)", "iu-Latn_CA"),
    LanguageRow("ja", "jpn", "Japanese", "ja_JP", google_name="ja", tesseract_name="jpn"),
    LanguageRow("jv", "jav", "Javanese", "jv_ID", google_name="jw", hunspell_name="jv_ID", tesseract_name="jav"),
    LanguageRow("ka", "kat", "Georgian", "ka_GE", google_name="ka", tesseract_name="kat"),
    LanguageRow("kk", "kaz", "Kazakh", "kk_KZ", google_name="kk", tesseract_name="kaz"),
    LanguageRow("kl", "kal", "Greenlandic", "kl_GL"),
    LanguageRow("km", "khm", "Khmer", "km_KH", google_name="km", tesseract_name="khm"),
    LanguageRow("kn", "kan", "Kannada", "kn_IN", google_name="kn", tesseract_name="kan"),
    LanguageRow("ko", "kor", "Korean", "ko_KR", google_name="ko", tesseract_name="kor"),
    LanguageRow("kok", "kok", "Konkani", "kok_IN"),
    LanguageRow("ky", "kir", "Kyrgyz", "ky_KG", tesseract_name="kir"),
    LanguageRow("la", "lat", "Latin", "la_VA", google_name="la", tesseract_name="lat"),
    LanguageRow("lb", "ltz", "Luxembourgish", "lb_LU", tesseract_name="ltz"),
    LanguageRow("lo", "lao", "Lao", "lo_LA", google_name="lo", tesseract_name="lao"),
    LanguageRow("lo-LA", "lao", "Lao (Lao P.D.R.)", hunspell_name="lo_LA"),
    LanguageRow("lt", "lit", "Lithuanian", "lt_LT", google_name="lt", tesseract_name="lit"),
    LanguageRow("lt-LT", "lit", "Lithuanian (Lithuania)", hunspell_name="lt_LT"),
    LanguageRow("lv", "lav", "Latvian", "lv_LV", google_name="lv", tesseract_name="lav"),
    LanguageRow("lv-LV", "lav", "Latvian (Latvia)", hunspell_name="lv_LV"),
    LanguageRow("mg", "mlg", "Malagasy", "mg_MG", google_name="mg"),
    LanguageRow("mi", "mri", "Maori", "mi_NZ", google_name="mi", tesseract_name="mri"),
    LanguageRow("mi-NZ", "mri", "Maori (New Zealand)", hunspell_name="mi_NZ"),
    LanguageRow("mk", "mkd", "Macedonian", "mk_MK", google_name="mk", tesseract_name="mkd"),
    LanguageRow("mk-MK", "mkd", "Macedonian (FYROM)", hunspell_name="mk_MK"),
    LanguageRow("ml", "mym", "Malayalam", "ml_IN", google_name="ml", tesseract_name="mal"),
    LanguageRow("ml-IN", "mym", "Malayalam (India)", hunspell_name="ml_IN"),
    LanguageRow("mn", "mon", "Mongolian", "mn_MN"),
    LanguageRow("mn-Cyrl", "mon", "Mongolian (Cyrillic)", "mn_MN", google_name="mn", tesseract_name="mon"),
    LanguageRow("mn-MN", "mon", "Mongolian (Cyrillic, Mongolia)", hunspell_name="mn_Cyrl_MN"),
    LanguageRow("mn-Mong", "mon", "Mongolian (Traditional)", "mn-Mong_CN"),
    LanguageRow("mn-Mong-CN", "mon", "Mongolian (Traditional, China)", hunspell_name="mn_Mong_CN"),
    LanguageRow("moh", "moh", "Mohawk", "moh_CA"),
    LanguageRow("moh-CA", "moh", "Mohawk (Canada)", hunspell_name="moh_CA"),
    LanguageRow("mr", "mar", "Marathi", "mr_IN", google_name="mr", tesseract_name="mar"),
    LanguageRow("mr-IN", "mar", "Marathi (India)", hunspell_name="mr_IN"),
    LanguageRow("ms", "msa", "Malay", "ms_MY", google_name="ms", tesseract_name="msa"),
    LanguageRow("ms-BN", "msa", "Malay (Brunei Darussalam)", hunspell_name="ms_BN"),
    LanguageRow("ms-MY", "msa", "Malay (Malaysia)", hunspell_name="ms_MY"),
    LanguageRow("mt", "mlt", "Maltese", "mt_MT", google_name="mt", tesseract_name="mlt"),
    LanguageRow("mt-MT", "mlt", "Maltese (Malta)", hunspell_name="mt_MT"),
    LanguageRow("my", "mya", "Burmese (Myanmar)", "my_MM", google_name="my", hunspell_name="my_MM", tesseract_name="mya"),
    LanguageRow("ne", "nep", "Nepali", "ne_NP", google_name="ne", tesseract_name="nep"),
    LanguageRow("ne-NP", "nep", "Nepali (Nepal)", hunspell_name="ne_NP"),
    LanguageRow("nl", "nld", "Dutch", "nl_NL", google_name="nl", hunspell_name="nl", tesseract_name="nld"),
    LanguageRow("no", "nob", "Norwegian", "nb_NO", google_name="no", tesseract_name="nor"),
    LanguageRow("nb", "nob", "Norwegian (Bokmål)", "nb_NO"),
    LanguageRow("nb-NO", "nob", "Norwegian (Bokmål, Norway)", hunspell_name="nb_NO"),
    LanguageRow("nn", "nno", "Norwegian (Nynorsk)", "nn_NO"),
    LanguageRow("nn-NO", "nno", "Norwegian (Nynorsk, Norway)", hunspell_name="nn_NO"),
    LanguageRow("nso", "nso", "Sesotho sa Leboa", "nso_ZA"),
    LanguageRow("nso-ZA", "nso", "Sesotho sa Leboa (South Africa)", hunspell_name="nso_ZA"),
    LanguageRow("ny", "nya", "Chichewa", "ny_MW", google_name="ny", hunspell_name="ny_MW"),
    LanguageRow("oc", "oci", "Occitan", "oc_FR", tesseract_name="oci"),
    LanguageRow("oc-FR", "oci", "Occitan (France)", hunspell_name="oc_FR"),
    LanguageRow("or", "ori", "Oriya", "or_IN", tesseract_name="ori"),
    LanguageRow("or-IN", "ori", "Oriya (India)", hunspell_name="or_IN"),
    LanguageRow("pa", "pan", "Punjabi", "pa_IN", google_name="pa", tesseract_name="pan"),
    LanguageRow("pa-IN", "pan", "Punjabi (India)", hunspell_name="pa_IN"),
    LanguageRow("pap", "pap", "Papiamento", "pap_CW"),
    LanguageRow("pap-AW", "pap", "Papiamento (Aruba)", hunspell_name="Papiamento"),
    LanguageRow("pap-BQ", "pap", "Papiamentu (Bonaire)", hunspell_name="Papiamentu"),
    LanguageRow("pap-CW", "pap", "Papiamentu (Curaçao)", hunspell_name="Papiamentu"),
    LanguageRow("pl", "pol", "Polish", "pl_PL", google_name="pl", tesseract_name="pol"),
    LanguageRow("pl-PL", "pol", "Polish (Poland)", hunspell_name="pl_PL"),
    LanguageRow("prs", "prs", "Dari", "prs_AF"),
    LanguageRow("prs-AF", "prs", "Dari (Afghanistan)", hunspell_name="prs_AF"),
    LanguageRow("ps", "pus", "Pashto", "ps_AF", tesseract_name="pus"),
    LanguageRow("ps-AF", "pus", "Pashto (Afghanistan)", hunspell_name="ps_AF"),
    LanguageRow("pt", "por", "Portuguese", "pt_PT", google_name="pt", tesseract_name="por"),
    LanguageRow("pt-BR", "por", "Portuguese (Brazil)", hunspell_name="pt_BR"),
    LanguageRow("pt-PT", "por", "Portuguese (Portugal)", hunspell_name="pt_PT"),
    LanguageRow("qut", "qut", "K'iche", "qut_GT"),
    LanguageRow("quz", "qub", "Quechua", "quz_BO", tesseract_name="que"),
    LanguageRow("rm", "roh", "Romansh", "rm_CH"),
    LanguageRow("ro", "ron", "Romanian", "ro_RO", google_name="ro", tesseract_name="ron"),
    LanguageRow("ro-RO", "ron", "Romanian (Romania)", hunspell_name="ro_RO"),
    LanguageRow("ru", "rus", "Russian", "ru_RU", google_name="ru", tesseract_name="rus"),
    LanguageRow("ru-RU", "rus", "Russian (Russia)", hunspell_name="ru_RU"),
    LanguageRow("rw", "kin", "Kinyarwanda", "rw_RW"),
    LanguageRow("rw-RW", "kin", "Kinyarwanda (Rwanda)", hunspell_name="rw_RW"),
    LanguageRow("sa", "san", "Sanskrit", "sa_IN", tesseract_name="san"),
    LanguageRow("sa-IN", "san", "Sanskrit (India)", hunspell_name="sa_IN"),
    LanguageRow("sah", "sah", "Yakut", "sah_RU"),
    LanguageRow("sah-RU", "sah", "Yakut (Russia)", hunspell_name="sah_RU"),
    LanguageRow("se", "sme", "Sami (Northern)", "se_NO"),
    LanguageRow("se-FI", "smg", "Sami (Northern, Finland)", hunspell_name="se_FI"),
    LanguageRow("se-NO", "sme", "Sami (Northern, Norway)", hunspell_name="se_NO"),
    LanguageRow("se-SE", "smf", "Sami (Northern, Sweden)", hunspell_name="se_SE"),
    LanguageRow("sma", "smb", "Sami (Southern)", "sma_SE"),
    LanguageRow("sma-NO", "sma", "Sami (Southern, Norway)", hunspell_name="sma_NO"),
    LanguageRow("sma-SE", "smb", "Sami (Southern, Sweden)", hunspell_name="sma_SE"),
    LanguageRow("smj", "smk", "Sami (Lule)", "smj_SE"),
    LanguageRow("smj-NO", "smj", "Sami (Lule, Norway)", hunspell_name="smj_NO"),
    LanguageRow("smj-SE", "smk", "Sami (Lule, Sweden)", hunspell_name="smj_SE"),
    LanguageRow("smn", "smn", "Sami (Inari)", "smn_FI"),
    LanguageRow("smn-FI", "smn", "Sami (Inari, Finland)", hunspell_name="smn_FI"),
    LanguageRow("sms", "sms", "Sami (Skolt)", "sms_FI"),
    LanguageRow("sms-FI", "sms", "Sami (Skolt, Finland)", hunspell_name="sms_FI"),
    LanguageRow("si", "sin", "Sinhala", "si_LK", google_name="si", tesseract_name="sin"),
    LanguageRow("si-LK", "sin", "Sinhala (Sri Lanka)", hunspell_name="si_LK"),
    LanguageRow("sk", "slk", "Slovak", "sk_SK", google_name="sk", tesseract_name="slk"),
    LanguageRow("sk-SK", "slk", "Slovak (Slovakia)", hunspell_name="sk_SK"),
    LanguageRow("sl", "slv", "Slovenian", "sl_SI", google_name="sl", tesseract_name="slv"),
    LanguageRow("sl-SI", "slv", "Slovenian (Slovenia)", hunspell_name="sl_SI"),
    LanguageRow("so", "som", "Somali", "so_SO", google_name="so"),
    LanguageRow("sq", "sqi", "Albanian", "sq_AL", google_name="sq", hunspell_name="sq", tesseract_name="sqi"),
    LanguageRow("sr-Cyrl", "srp", "Serbian (Cyrillic)", "sr-Cyrl_RS", hunspell_name="sr", tesseract_name="srp"),
    LanguageRow("sr-Latn", "srp", "Serbian (Latin)", "sr-Latn_RS", google_name="sr", hunspell_name="sr-Latn", tesseract_name="srp_latn"),
    LanguageRow("su", "sun", "Sundanese", "su_ID", google_name="su", hunspell_name="su_ID", tesseract_name="sun"),
    LanguageRow("sv", "swe", "Swedish", "sv_SE", google_name="sv", hunspell_name="sv_SE", tesseract_name="swe"),
    LanguageRow("sw", "swa", "Kiswahili", "sw_KE", google_name="sw", tesseract_name="swa"),
    LanguageRow("sw-KE", "swa", "Kiswahili (Kenya)", hunspell_name="sw_KE"),
    LanguageRow("syr", "syr", "Syriac", "syr_SY", tesseract_name="syr"),
    LanguageRow("syr-SY", "syr", "Syriac (Syria)", hunspell_name="syr_SY"),
    LanguageRow("ta", "tam", "Tamil", "ta_IN", google_name="ta", tesseract_name="tam"),
    LanguageRow("ta-IN", "tam", "Tamil (India)", hunspell_name="ta_IN"),
    LanguageRow("te", "tel", "Telugu", "te_IN", google_name="te", tesseract_name="tel"),
    LanguageRow("te-IN", "tel", "Telugu (India)", hunspell_name="te_IN"),
    LanguageRow("tg-Cyrl", "tgk", "Tajik (Cyrillic)", "tg-Cyrl_TJ", google_name="tg", tesseract_name="tgk"),
    LanguageRow("tg-Cyrl-TJ", "tgk", "Tajik (Cyrillic, Tajikistan)", hunspell_name="tg_Cyrl_TJ"),
    LanguageRow("th", "tha", "Thai", "th_TH", google_name="th", tesseract_name="tha"),
    LanguageRow("th-TH", "tha", "Thai (Thailand)", hunspell_name="th_TH"),
    LanguageRow("ti", "tir", "Tigrinya", "ti_ER", tesseract_name="tir"),
    LanguageRow("tk", "tuk", "Turkmen", "tk_TM"),
    LanguageRow("tn", "tsn", "Setswana", "tn_ZA"),
    LanguageRow("tr", "tur", "Turkish", "tr_TR", google_name="tr", hunspell_name="tr_TR", tesseract_name="tur"),
    LanguageRow("tt", "tat", "Tatar", "tt_RU", tesseract_name="tat"),
    LanguageRow("tzm-Latn", "tzm", "Tamazight (Latin)", "tzm-Latn_DZ"),
    LanguageRow("ug", "uig", "Uyghur", "ug_CN", tesseract_name="uig"),
    LanguageRow("uk", "ukr", "Ukrainian", "uk_UA", google_name="uk", hunspell_name="uk_UA", tesseract_name="ukr"),
    LanguageRow("ur", "urd", "Urdu", "ur_PK", google_name="ur", tesseract_name="urd"),
    LanguageRow("uz-Cyrl", "uzb", "Uzbek (Cyrillic)", "uz-Cyrl_UZ", tesseract_name="uzb_cyrl"),
    LanguageRow("uz-Latn", "uzb", "Uzbek (Latin)", "uz-Latn_UZ", google_name="uz", tesseract_name="uzb"),
    LanguageRow("vi", "vie", "Vietnamese", "vi_VN", google_name="vi", tesseract_name="vie"),
    LanguageRow("wo", "wol", "Wolof", "wo_SN"),
    LanguageRow("xh", "xho", "isiXhosa", "xh_ZA"),
    LanguageRow("yi", "yid", "Yiddish", "yi_001", google_name="yi", hunspell_name="yi", tesseract_name="yid"),
    LanguageRow("yo", "yor", "Yoruba", "yo_NG", google_name="yo", tesseract_name="yor"),
    LanguageRow("zh-Hans", "zho", "Chinese (Simplified)", "zh_CN", google_name="zh", tesseract_name="chi_sim"),
    LanguageRow("zh-Hant", "zho", "Chinese (Traditional)", "zh_TW", google_name="zh-TW", tesseract_name="chi_tra"),
    LanguageRow("zu", "zul", "isiZulu", "zu_ZA", google_name="zu"),
)

__all__ = ["LANGUAGE_ROWS", "LanguageRow"]
