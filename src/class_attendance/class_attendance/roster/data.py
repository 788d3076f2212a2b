"""Static roster for SK Kg Klid/Plajau, Kelas Bimbingan dan Gilap Permata."""

TEACHERS = (
    ("t1", "ALYSA JULIA ANAK THORNLEY"),
    ("t2", "DAYANG ERINA NATASHA BINTI ABANG ABBEHA"),
    ("t3", "DAVE BIN ASON"),
    ("t4", "FAID BIN ZULKIFLI"),
    ("t5", "GRACE ANAK KANA"),
    ("t6", "JESSICA ANAK KATANG"),
    ("t7", "MARIATI BINTI PADLAM"),
    ("t8", "MUHAMMAD AIMAN CYPRIAN BIN MUHD NIZAM"),
    ("t9", "RAFFI BIN SMAIL"),
    ("t10", "RAZELI BIN SIRAT"),
    ("t11", "REBENA BINTI ASIN"),
    ("t12", "SAHARUDDIN BIN SAPIAE"),
    ("t13", "IZWANSYAH BIN LAMUHAMMADE"),
)

# (year, name); ids are derived from the position in this list.
RAW_PUPILS = (
    # Tahun 1
    (1, "CLARARISSA LIVONIA BINTI LEHAN"),
    (1, "MIA ARIANA BINTI ANDUKHA ELRONDY"),
    (1, "DANIELSON BIN JASON"),
    # Tahun 2
    (2, "MELYSHA"),
    (2, "MICHAEL ABRAHAM MELKISEDEK"),
    (2, "NUR QYSSTINA QHAYSARA BINTI MOHD IQBAL QUSSYAIRI"),
    (2, "RAZIA ROSSA ANAK STEFFENS ANDY"),
    (2, "FARIZ NAUFAL BIN FIRDAUS AHSENG"),
    (2, "ASHRIQ AQIEL BIN RAZAN"),
    # Tahun 3
    (3, "RAYYEN HAYDEN BIN ALOYSIS"),
    (3, "LUCIA AMANDA BINTI ZUINI"),
    (3, "VELLVET GEORGIANA ZHI LIM"),
    (3, "KAYZILL KAYNOVIL BIN INI"),
    (3, "RACHELL ERCILIA"),
    # Tahun 4
    (4, "NUR FARINA BINTI ABDULLAH"),
    (4, "ABDULLAH HANIF BIN RAFFI"),
    (4, "CYRIL IGNATIUS BIN KALUNI"),
    (4, "MOHAMAD AADI PUTRA BIN ABDULLAH"),
    # Tahun 5
    (5, "ARMELLICIANA BINTI ARYANG"),
    (5, "JACKSON BIN JULUIENG"),
    (5, "JERALD DAMIAN BIN JASON"),
    (5, "KYRA KIRANA BINTI MAULANA"),
    (5, "VINCE DENZEL ZHEN LIM"),
    # Tahun 6
    (6, "DANNY ALVES BIN MAULANA"),
    (6, "KEARLY FAYREENDY BIN KENNEDY"),
    (6, "NUR ANISYA BINTI JAMEJAMY"),
    (6, "RACHEL JANE ANAK STEFFENS ANDY"),
)
