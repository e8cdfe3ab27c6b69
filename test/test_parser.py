from unittest import TestCase


class TestParseAtom(TestCase):
    def test_exact(self):
        from pyucum import UnitParser, Dimension

        p = UnitParser()
        res = p.parse('km')
        self.assertTrue(res.is_valid)
        self.assertEqual(res.magnitude, 1000.0)
        self.assertEqual(res.dimension, Dimension(length=1))
        self.assertEqual(res.unit.code, 'm')
        self.assertEqual(res.prefix.code, 'k')

        res = p.parse('[lb_av]')
        self.assertIsNone(res.prefix)
        self.assertAlmostEqual(res.magnitude, 453.59237)
        self.assertEqual(res.get_name(plural=True), 'pounds')

        res = p.parse('[ft_i]')
        self.assertEqual(res.get_name(), 'foot')
        self.assertEqual(res.get_name(plural=True), 'feet')

        self.assertAlmostEqual(p.parse('%').magnitude, 0.01)

    def test_catalog_codes(self):
        from pyucum import UnitParser

        p = UnitParser()
        for unit in p.units:
            res = p.parse(unit.code)
            self.assertIsNone(res.error, msg=unit.code)
            self.assertIs(res.unit, unit, msg=unit.code)
            self.assertEqual(res.magnitude, unit.magnitude, msg=unit.code)
            self.assertEqual(res.dimension, unit.dimension, msg=unit.code)

    def test_prefixed_metric_units(self):
        from pyucum import UnitParser

        p = UnitParser()
        for unit in p.units:
            if not unit.is_metric:
                continue
            for prefix in p.prefixes:
                # Bracketed codes are checked in test_prefix_rules, as
                # e.g. 'k[g]' is kilogram once brackets are removed.
                code = prefix.code + unit.code
                if code in p.catalog or '[' in unit.code:
                    continue

                res = p.parse(code)
                self.assertIsNone(res.error, msg=code)
                self.assertEqual(res.magnitude,
                                 unit.magnitude * prefix.value, msg=code)
                self.assertEqual(res.dimension, unit.dimension, msg=code)

    def test_prefix_rules(self):
        from pyucum import UnitParser

        p = UnitParser()

        # Brackets are decoration only: [kg] is kilo + gram.
        res = p.parse('[kg]')
        self.assertEqual((res.prefix.code, res.unit.code), ('k', 'g'))
        self.assertEqual(res.get_name(plural=True), 'kilograms')

        # Longest prefix first.
        res = p.parse('dam')
        self.assertEqual((res.prefix.code, res.unit.code), ('da', 'm'))
        res = p.parse('dar')
        self.assertEqual((res.prefix.code, res.unit.code), ('d', 'ar'))

        # Exact code beats prefix + unit ('cd' is candela, not centi-day).
        res = p.parse('cd')
        self.assertIsNone(res.prefix)
        self.assertEqual(res.unit.name, 'candela')

        # Only metric units take prefixes.
        for code in ('k[lb_av]', 'kmin', 'c[ft_i]'):
            res = p.parse(code)
            self.assertFalse(res.is_valid)
            self.assertIn('Unknown unit', res.error)

        # Prefix on a unit which contains brackets.
        res = p.parse('mm[Hg]')
        self.assertEqual((res.prefix.code, res.unit.code), ('m', 'm[Hg]'))
        self.assertAlmostEqual(res.magnitude, 133322.387415)
        res = p.parse('cm[H2O]')
        self.assertEqual((res.prefix.code, res.unit.code), ('c', 'm[H2O]'))
        res = p.parse('k[c]')
        self.assertEqual((res.prefix.code, res.unit.code), ('k', '[c]'))

        # Once brackets are removed, 'k[g]' is kilo + gram.
        res = p.parse('k[g]')
        self.assertEqual((res.prefix.code, res.unit.code), ('k', 'g'))

        # Binary prefixes.
        self.assertEqual(p.parse('KiBy').magnitude, 8 * 1024)

    def test_parse_atom(self):
        from pyucum import UnitParser, Dimension, UnknownUnitError

        p = UnitParser()
        res = p.parse_atom('cm', 3)
        self.assertEqual(res.exponent, 3)
        self.assertAlmostEqual(res.magnitude, 1e-6)
        self.assertEqual(res.dimension, Dimension(length=3))

        res = p.parse_atom('ms', -1)
        self.assertAlmostEqual(res.magnitude, 1000.0)
        self.assertEqual(res.dimension, Dimension(time=-1))

        res = p.parse_atom('km', 0)
        self.assertEqual(res.magnitude, 1.0)
        self.assertTrue(res.dimension.is_dimensionless())

        res = p.parse_atom('foo', 2)
        self.assertEqual(res.error, 'Unknown unit: foo')
        self.assertIs(res.error_type, UnknownUnitError)
        self.assertEqual(res.magnitude, 1.0)
        self.assertTrue(res.dimension.is_dimensionless())

    def test_exact_powers(self):
        from pyucum import UnitParser

        # Repeated multiplication, not float pow().
        p = UnitParser()
        self.assertEqual(p.parse('[in_i]3').magnitude,
                         0.0254 * 0.0254 * 0.0254)
        self.assertEqual(p.parse('[ft_i]-2').magnitude,
                         1.0 / (0.3048 * 0.3048))

    def test_resolve(self):
        from pyucum import UnitParser

        p = UnitParser()
        self.assertEqual(p.resolve_atom('Pa').name, 'pascal')
        self.assertIsNone(p.resolve_atom('PAL'))
        self.assertIsNone(p.resolve_atom('km'))
        self.assertEqual(p.resolve_prefix('da').name, 'deka')
        self.assertIsNone(p.resolve_prefix('DA'))

        p = UnitParser(case_sensitive=False)
        self.assertEqual(p.resolve_atom('PAL').code, 'Pa')
        self.assertEqual(p.resolve_prefix('DA').code, 'da')


class TestParse(TestCase):
    def test_composite(self):
        from pyucum import UnitParser, Dimension

        p = UnitParser()
        res = p.parse('kg.m/s2')
        self.assertTrue(res.is_valid)
        self.assertEqual(res.dimension, Dimension(mass=1, length=1,
                                                  time=-2))
        self.assertAlmostEqual(res.magnitude, 1000.0)
        self.assertIsNone(res.unit)
        self.assertEqual(len(res.components), 3)
        self.assertEqual(res.operators, ('.', '/'))
        self.assertEqual(res.code, 'kg.m/s2')

        res = p.parse('mg/dL')
        self.assertAlmostEqual(res.magnitude, 10.0)
        self.assertEqual(res.dimension, Dimension(mass=1, length=-3))

        # Left to right: m/s.s == m.
        res = p.parse('m/s.s')
        self.assertEqual(res.dimension, Dimension(length=1))

    def test_parentheses(self):
        from pyucum import UnitParser, Dimension

        p = UnitParser()
        res = p.parse('kg/(m.s2)')
        self.assertEqual(res.dimension, Dimension(mass=1, length=-1,
                                                  time=-2))
        self.assertAlmostEqual(res.magnitude, 1000.0)
        self.assertEqual(res.code, 'kg/(m.s2)')

        res = p.parse('(m/s)2')
        self.assertEqual(res.dimension, Dimension(length=2, time=-2))
        self.assertEqual(res.exponent, 2)
        self.assertEqual(res.code, '(m/s)2')

        res = p.parse('(km)2')
        self.assertEqual(res.unit.code, 'm')
        self.assertEqual(res.exponent, 2)
        self.assertEqual(res.magnitude, 1000.0 * 1000.0)

        res = p.parse('((m))')
        self.assertEqual(res.dimension, Dimension(length=1))

        res = p.parse('(Cel)')
        self.assertTrue(res.is_special)
        res = p.parse('(Cel/h)2')
        self.assertTrue(res.is_special)

    def test_unity_and_annotations(self):
        from pyucum import UnitParser, Dimension

        p = UnitParser()
        res = p.parse('1')
        self.assertTrue(res.is_valid)
        self.assertTrue(res.is_unity)
        self.assertEqual(res.code, '1')

        res = p.parse('{RBC}')
        self.assertTrue(res.is_valid)
        self.assertEqual(res.magnitude, 1.0)
        self.assertTrue(res.dimension.is_dimensionless())

        res = p.parse('{RBC}/uL')
        self.assertTrue(res.is_valid)
        self.assertEqual(res.dimension, Dimension(length=-3))
        self.assertAlmostEqual(res.magnitude / 1e9, 1.0)

        res = p.parse('1/d')
        self.assertEqual(res.dimension, Dimension(time=-1))
        self.assertEqual(res.code, '1/d')

        # Annotation attached to a unit.
        res = p.parse('mL{total}')
        self.assertTrue(res.is_valid)
        self.assertEqual(res.unit.code, 'L')
        self.assertAlmostEqual(res.magnitude, 1e-6)
        res = p.parse('g/(24.h)')
        self.assertFalse(res.is_valid)
        res = p.parse('g/h{24h}')
        self.assertTrue(res.is_valid)

    def test_errors(self):
        from pyucum import (UnitParser, EmptyInputError, LexicalError,
                            UnknownUnitError, ExpressionSyntaxError)

        p = UnitParser()
        for expr, err_type, msg in (
                ('', EmptyInputError, 'Empty unit string'),
                ('xyz', UnknownUnitError, 'Unknown unit: xyz'),
                ('m{abc', LexicalError, 'Unclosed annotation'),
                ('[lb_av', LexicalError, 'Unclosed bracket'),
                ('m#', LexicalError, 'Unexpected character'),
                ('m./s', ExpressionSyntaxError, 'Unexpected token'),
                ('m.', ExpressionSyntaxError, 'Unexpected end'),
                ('/s', ExpressionSyntaxError, 'Unexpected token'),
                ('2', ExpressionSyntaxError, 'Unexpected token')):
            res = p.parse(expr)
            self.assertFalse(res.is_valid, msg=expr)
            self.assertIs(res.error_type, err_type, msg=expr)
            self.assertIn(msg, res.error, msg=expr)
            self.assertEqual(res.magnitude, 1.0)
            self.assertTrue(res.dimension.is_dimensionless())
            self.assertEqual(res.original, expr)

            with self.assertRaises(err_type):
                res.raise_error()

    def test_strict(self):
        from pyucum import UnitParser, ExpressionSyntaxError

        p = UnitParser(strict=True)

        # Errors anywhere reach the top level.
        res = p.parse('kg.xyz/s')
        self.assertEqual(res.error, 'Unknown unit: xyz')
        res = p.parse('m/(s.foo)2')
        self.assertEqual(res.error, 'Unknown unit: foo')

        res = p.parse('kg/(m.s2')
        self.assertIs(res.error_type, ExpressionSyntaxError)
        self.assertIn('Missing closing parenthesis', res.error)

        res = p.parse('m)')
        self.assertIn('Unexpected token: )', res.error)
        res = p.parse('m s')
        self.assertIn('Unexpected token: s', res.error)

    def test_lenient(self):
        from pyucum import UnitParser, Dimension

        p = UnitParser(strict=False)

        # Sub-errors fold away as dimensionless unity.
        res = p.parse('kg.xyz/s')
        self.assertIsNone(res.error)
        self.assertEqual(res.dimension, Dimension(mass=1, time=-1))

        # Missing ')' and trailing tokens are tolerated.
        res = p.parse('kg/(m.s2')
        self.assertIsNone(res.error)
        self.assertEqual(res.dimension, Dimension(mass=1, length=-1,
                                                  time=-2))
        self.assertIsNone(p.parse('m)').error)

        # An error at the top level is still reported.
        self.assertEqual(p.parse('xyz').error, 'Unknown unit: xyz')

        # Per-call override.
        self.assertIsNotNone(p.parse('kg.xyz', strict=True).error)

        # A failed group raised to a power becomes unity.
        res = p.parse('(xyz)2')
        self.assertIsNone(res.error)
        self.assertTrue(res.is_unity)
        self.assertEqual(p.parse('m.(xyz)2').dimension, Dimension(length=1))
        self.assertEqual(p.parse('(xyz)').error, 'Unknown unit: xyz')

    def test_nesting_limit(self):
        from pyucum import UnitParser, ucum_options

        with ucum_options(max_nesting=3):
            p = UnitParser()

        self.assertTrue(p.parse('(((m)))').is_valid)
        res = p.parse('((((m))))')
        self.assertIn('nested too deeply', res.error)

    def test_case_insensitive(self):
        from pyucum import UnitParser

        p = UnitParser(case_sensitive=False)
        self.assertAlmostEqual(p.parse('MG').magnitude, 0.001)
        self.assertAlmostEqual(p.parse('KPAL').magnitude, 1e6)
        self.assertAlmostEqual(p.parse('kPa').magnitude, 1e6)
        self.assertEqual(p.parse('MAM').prefix.code, 'M')
        self.assertTrue(p.parse('[LB_AV]').is_valid)
        self.assertTrue(p.parse('MM[HG]').is_valid)

        p = UnitParser(case_sensitive=True)
        self.assertFalse(p.parse('[LB_AV]').is_valid)

    def test_names(self):
        from pyucum import UnitParser, ucum_options

        p = UnitParser()
        self.assertEqual(p.parse('km/h').get_name(plural=True),
                         'kilometers per hour')
        self.assertEqual(p.parse('N.m').get_name(), 'newton meter')
        self.assertEqual(str(p.parse('kg.m/s2')), 'kg.m/s2')
        self.assertEqual(p.parse('xyz').get_name(), 'xyz')

        with ucum_options(unicode_str=False):
            self.assertEqual(p.parse('m2').get_name(), 'meter^2')
        with ucum_options(unicode_str=True):
            self.assertEqual(p.parse('m2').get_name(), 'meter²')

    def test_register_unit(self):
        from pyucum import UnitParser, UnitDef, Dimension

        p, other = UnitParser(), UnitParser()
        p.register_unit(UnitDef(code='[smoot]', name='smoot',
                                magnitude=1.7018,
                                dimension=Dimension(length=1)))
        self.assertAlmostEqual(p.parse('[smoot]').magnitude, 1.7018)
        self.assertFalse(other.parse('[smoot]').is_valid)

        # Only metric units take prefixes.
        self.assertFalse(p.parse('k[smoot]').is_valid)

    def test_validate(self):
        from pyucum import UnitParser

        p = UnitParser()
        res = p.validate('kg.m/s2')
        self.assertTrue(res.is_valid)
        self.assertEqual(res.normalized_code, 'kg.m/s2')
        self.assertEqual(res.messages, ())

        res = p.validate('kg/foo')
        self.assertFalse(res.is_valid)
        self.assertIsNone(res.normalized_code)
        self.assertEqual(res.messages, ('Unknown unit: foo',))

    def test_zero_size_unit(self):
        from pyucum import UnitParser, UnitDef, UcumError

        p = UnitParser()
        p.register_unit(UnitDef(code='zz', name='zero', magnitude=0.0))
        self.assertEqual(p.parse('zz').magnitude, 0.0)

        # Arithmetic failures are reported on the result.
        for expr in ('1/zz', 'zz-1', 'm/(zz)2'):
            res = p.parse(expr)
            self.assertTrue(res.error.startswith('Parse error: '), msg=expr)
            self.assertIs(res.error_type, UcumError)
            self.assertFalse(res.is_valid)

    def test_large_exponent(self):
        import time
        from pyucum import UnitParser, Dimension

        p = UnitParser()
        start = time.perf_counter()
        res = p.parse('m3000000000')
        self.assertLess(time.perf_counter() - start, 0.5)
        self.assertIsNone(res.error)
        self.assertEqual(res.dimension, Dimension(length=3000000000))
        self.assertEqual(res.magnitude, 1.0)

        self.assertAlmostEqual(p.parse('[in_i]12').magnitude / 0.0254 ** 12,
                               1.0)
        self.assertAlmostEqual(p.parse('[in_i]-5').magnitude
                               * 0.0254 ** 5, 1.0)
