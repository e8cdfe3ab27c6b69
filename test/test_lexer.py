from unittest import TestCase


class TestTokenize(TestCase):
    def test_operators(self):
        from pyucum import tokenize, TokenKind as K

        tokens = tokenize('kg.m/s2')
        self.assertEqual([t.kind for t in tokens],
                         [K.UNIT, K.MULTIPLY, K.UNIT, K.DIVIDE, K.UNIT,
                          K.NUMBER, K.END])
        self.assertEqual([t.text for t in tokens],
                         ['kg', '.', 'm', '/', 's', '2', ''])
        self.assertEqual([t.position for t in tokens],
                         [0, 2, 3, 4, 5, 6, 7])

    def test_whitespace(self):
        from pyucum import tokenize

        self.assertEqual([t.text for t in tokenize(' m \t/ s ')],
                         ['m', '/', 's', ''])
        self.assertEqual(len(tokenize('')), 1)

    def test_parentheses(self):
        from pyucum import tokenize, TokenKind as K

        tokens = tokenize('kg/(m.s2)-1')
        self.assertEqual([t.kind for t in tokens],
                         [K.UNIT, K.DIVIDE, K.OPEN_PAREN, K.UNIT,
                          K.MULTIPLY, K.UNIT, K.NUMBER, K.CLOSE_PAREN,
                          K.NUMBER, K.END])
        self.assertEqual(tokens[-2].text, '-1')

    def test_exponents(self):
        from pyucum import tokenize, TokenKind as K

        for expr, exp in (('m2', '2'), ('s-1', '-1'), ('cm+3', '+3'),
                          ('[ft_i]10', '10')):
            tokens = tokenize(expr)
            self.assertEqual(tokens[1].kind, K.NUMBER)
            self.assertEqual(tokens[1].text, exp)

        # Literal unity.
        tokens = tokenize('1/d')
        self.assertEqual((tokens[0].kind, tokens[0].text),
                         (K.NUMBER, '1'))

    def test_annotations(self):
        from pyucum import tokenize, TokenKind as K, LexicalError

        tokens = tokenize('{RBC}/uL')
        self.assertEqual(tokens[0].kind, K.ANNOTATION)
        self.assertEqual(tokens[0].text, '{RBC}')

        # Contents are taken verbatim.
        tokens = tokenize('mL{total volume (24 h)}')
        self.assertEqual(tokens[1].text, '{total volume (24 h)}')

        with self.assertRaises(LexicalError) as cm:
            tokenize('mg{abc')
        self.assertIn("Unclosed annotation", str(cm.exception))
        self.assertEqual(cm.exception.position, 2)

    def test_brackets(self):
        from pyucum import tokenize, TokenKind as K, LexicalError

        for atom in ('[lb_av]', 'mm[Hg]', "[in_i'Hg]", '%[slope]',
                     'm[H2O]', '[p\'diop]', 'a[b]c[d]'):
            tokens = tokenize(atom)
            self.assertEqual(len(tokens), 2)
            self.assertEqual((tokens[0].kind, tokens[0].text),
                             (K.UNIT, atom))

        with self.assertRaises(LexicalError) as cm:
            tokenize('[lb_av')
        self.assertIn("Unclosed bracket", str(cm.exception))

        with self.assertRaises(LexicalError) as cm:
            tokenize('m[H[2]O]')
        self.assertIn("Nested bracket", str(cm.exception))

        # Space inside brackets ends the atom while still unclosed.
        with self.assertRaises(LexicalError):
            tokenize('[lb av]')

    def test_unexpected_character(self):
        from pyucum import tokenize, LexicalError

        for expr in ('m*s', 'm^2', 'kg#', 'm-', 'm.-s', 'µm'):
            with self.assertRaises(LexicalError):
                tokenize(expr)

        with self.assertRaises(LexicalError) as cm:
            tokenize('m^2')
        self.assertEqual(cm.exception.position, 1)
        self.assertEqual(cm.exception.expression, 'm^2')
