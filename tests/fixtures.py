# Small excerpts in the shape of allkeys.txt, allkeys_CLDR.txt and UnicodeData.txt. Weights are picked to
# exercise the remapping ranges rather than copied from one release of the tables.

DUCET_KEYS = """\
# allkeys.txt excerpt
@version 15.1.0

@implicitweights 17000..18AFF; FB00 # Tangut and Tangut Components

0000  ; [.0000.0000.0000] # NULL
0009  ; [*0201.0020.0002] # <CHARACTER TABULATION>
0020  ; [*0209.0020.0002] # SPACE
00A8  ; [*0209.0020.0002][.0000.002B.0002] # DIAERESIS
0030  ; [.1FA3.0020.0002] # DIGIT ZERO
0041  ; [.0B7E.0020.0008] # LATIN CAPITAL LETTER A
0061  ; [.0B7E.0020.0002] # LATIN SMALL LETTER A
004C  ; [.0CFF.0020.0008] # LATIN CAPITAL LETTER L
006C  ; [.0CFF.0020.0002] # LATIN SMALL LETTER L
004C 00B7 ; [.0CFF.0020.0008][.0000.0111.0002] # LATIN CAPITAL LETTER L WITH MIDDLE DOT
0300  ; [.0000.0025.0002] # COMBINING GRAVE ACCENT
00E0  ; [.0B7E.0020.0002][.0000.0025.0002] # LATIN SMALL LETTER A WITH GRAVE
0FB2 0F81 ; [.3290.0020.0002][.0000.0111.0002][.0000.0112.0002] # TIBETAN SUBJOINED LETTER RA WITH VOWEL SIGN REVERSED II
"""

CLDR_KEYS = """\
# allkeys_CLDR.txt excerpt
@version 15.1.0

0000  ; [.0000.0000.0000] # NULL
0009  ; [*0201.0020.0002] # <CHARACTER TABULATION>
0020  ; [*0209.0020.0002] # SPACE
0030  ; [.2000.0020.0002] # DIGIT ZERO
0041  ; [.2380.0020.0008] # LATIN CAPITAL LETTER A
0061  ; [.2380.0020.0002] # LATIN SMALL LETTER A
1D00  ; [.2384.0020.0002] # LATIN LETTER SMALL CAPITAL A
0062  ; [.239C.0020.0002] # LATIN SMALL LETTER B
0068  ; [.2454.0020.0002] # LATIN SMALL LETTER H
004C  ; [.24BC.0020.0008] # LATIN CAPITAL LETTER L
006C  ; [.24BC.0020.0002] # LATIN SMALL LETTER L
004C 00B7 ; [.24BC.0020.0008][.0000.0111.0002] # LATIN CAPITAL LETTER L WITH MIDDLE DOT
0061 0308 ; [.2384.0020.0002][.0000.002B.0002] # contrived contraction inside the bump range
0621  ; [.2A68.0020.0002] # ARABIC LETTER HAMZA
0627  ; [.2A76.0020.0002] # ARABIC LETTER ALEF
0628  ; [.2A78.0020.0002] # ARABIC LETTER BEH
0644  ; [.2B19.0020.0002] # ARABIC LETTER LAM
FDF2  ; [.2B19.0020.0004][.2B19.0020.0004][.2B30.0020.0004] # ARABIC LIGATURE ALLAH ISOLATED FORM
0627 0653 ; [.2A69.0020.0002] # ARABIC LETTER ALEF WITH MADDA ABOVE
0644 0627 ; [.2B19.0020.0002][.2A76.0020.0002] # ARABIC LETTER LAM, ARABIC LETTER ALEF
0E40 0E01 ; [.3B21.0020.0002][.3B5E.0020.0002] # THAI CHARACTER SARA E, THAI CHARACTER KO KAI
"""

UNICODE_DATA = """\
0041;LATIN CAPITAL LETTER A;Lu;0;L;;;;;N;;;;0061;
0043;LATIN CAPITAL LETTER C;Lu;0;L;;;;;N;;;;0063;
00A0;NO-BREAK SPACE;Zs;0;CS;<noBreak> 0020;;;;N;NON-BREAKING SPACE;;;;
00C0;LATIN CAPITAL LETTER A WITH GRAVE;Lu;0;L;0041 0300;;;;N;LATIN CAPITAL LETTER A GRAVE;;;00E0;
00C5;LATIN CAPITAL LETTER A WITH RING ABOVE;Lu;0;L;0041 030A;;;;N;LATIN CAPITAL LETTER A RING;;;00E5;
00C7;LATIN CAPITAL LETTER C WITH CEDILLA;Lu;0;L;0043 0327;;;;N;LATIN CAPITAL LETTER C CEDILLA;;;00E7;
0300;COMBINING GRAVE ACCENT;Mn;230;NSM;;;;;N;NON-SPACING GRAVE;;;;
0301;COMBINING ACUTE ACCENT;Mn;230;NSM;;;;;N;NON-SPACING ACUTE;;;;
0308;COMBINING DIAERESIS;Mn;230;NSM;;;;;N;NON-SPACING DIAERESIS;;;;
030A;COMBINING RING ABOVE;Mn;230;NSM;;;;;N;NON-SPACING RING ABOVE;;;;
0327;COMBINING CEDILLA;Mn;202;ATBL;;;;;N;NON-SPACING CEDILLA;;;;
0340;COMBINING GRAVE TONE MARK;Mn;230;NSM;0300;;;;N;NON-SPACING GRAVE TONE MARK;;;;
0344;COMBINING GREEK DIALYTIKA TONOS;Mn;230;NSM;0308 0301;;;;N;GREEK NON-SPACING DIAERESIS TONOS;;;;
0F71;TIBETAN VOWEL SIGN AA;Mn;129;NSM;;;;;N;;;;;
0F72;TIBETAN VOWEL SIGN I;Mn;130;NSM;;;;;N;;;;;
0F73;TIBETAN VOWEL SIGN II;Mn;0;NSM;0F71 0F72;;;;N;;;;;
1E08;LATIN CAPITAL LETTER C WITH CEDILLA AND ACUTE;Lu;0;L;00C7 0301;;;;N;;;;1E09;
212B;ANGSTROM SIGN;Lu;0;L;00C5;;;;N;ANGSTROM UNIT;;;00E5;
AC00;<Hangul Syllable, First>;Lo;0;L;;;;;N;;;;;
D7A3;<Hangul Syllable, Last>;Lo;0;L;;;;;N;;;;;
F900;CJK COMPATIBILITY IDEOGRAPH-F900;Lo;0;L;8C48;;;;N;;;;;
"""
