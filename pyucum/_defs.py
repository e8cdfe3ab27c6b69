import math

from ._catalog import add_prefix, add_unit, UnitCategory
from ._dim import Dimension

# Magnitudes below are given relative to the UCUM base units m, s, g,
# rad, K, C and cd.  Note that the base unit of mass is the gram, so
# e.g. one newton has magnitude 1000.

# == Dimensions ========================================================

LEN = Dimension(length=1)
TIME = Dimension(time=1)
MASS = Dimension(mass=1)
ANGLE = Dimension(angle=1)
TEMP = Dimension(temperature=1)
CHARGE = Dimension(charge=1)
LUM = Dimension(luminosity=1)

AREA = LEN ** 2
VOLUME = LEN ** 3
FREQ = TIME.inverse()
VELOCITY = LEN / TIME
ACCEL = VELOCITY / TIME
FORCE = MASS * ACCEL
PRESSURE = FORCE / AREA
ENERGY = FORCE * LEN
POWER = ENERGY / TIME
CURRENT = CHARGE / TIME
POTENTIAL = ENERGY / CHARGE
RESISTANCE = POTENTIAL / CURRENT
MAG_FLUX = POTENTIAL * TIME
DOSE = ENERGY / MASS

_AVOGADRO = 6.0221367e23
_LBF_AV = 453.59237 * 9.80665  # Pound force (g.m/s²).

# == Prefixes ==========================================================

# -- Metric ------------------------------------------------------------

add_prefix('Y', 'yotta', 1e24, 24, ci_code='YA')
add_prefix('Z', 'zetta', 1e21, 21, ci_code='ZA')
add_prefix('E', 'exa', 1e18, 18, ci_code='EX')
add_prefix('P', 'peta', 1e15, 15, ci_code='PT')
add_prefix('T', 'tera', 1e12, 12, ci_code='TR')
add_prefix('G', 'giga', 1e9, 9, ci_code='GA')
add_prefix('M', 'mega', 1e6, 6, ci_code='MA')
add_prefix('k', 'kilo', 1e3, 3, ci_code='K')
add_prefix('h', 'hecto', 1e2, 2, ci_code='H')
add_prefix('da', 'deka', 1e1, 1, ci_code='DA')
add_prefix('d', 'deci', 1e-1, -1, ci_code='D')
add_prefix('c', 'centi', 1e-2, -2, ci_code='C')
add_prefix('m', 'milli', 1e-3, -3, ci_code='M')
add_prefix('u', 'micro', 1e-6, -6, ci_code='U', print_symbol='μ')
add_prefix('n', 'nano', 1e-9, -9, ci_code='N')
add_prefix('p', 'pico', 1e-12, -12, ci_code='P')
add_prefix('f', 'femto', 1e-15, -15, ci_code='F')
add_prefix('a', 'atto', 1e-18, -18, ci_code='A')
add_prefix('z', 'zepto', 1e-21, -21, ci_code='ZO')
add_prefix('y', 'yocto', 1e-24, -24, ci_code='YO')

# -- Binary ------------------------------------------------------------

add_prefix('Ki', 'kibi', 1024.0, 10, ci_code='KIB')
add_prefix('Mi', 'mebi', 1048576.0, 20, ci_code='MIB')
add_prefix('Gi', 'gibi', 1073741824.0, 30, ci_code='GIB')
add_prefix('Ti', 'tebi', 1099511627776.0, 40, ci_code='TIB')

# == Base Units ========================================================

add_unit('m', 'meter', 1.0, LEN, quantity='length', is_base=True,
         is_metric=True, plural_name='meters', synonyms=('metre',))
add_unit('s', 'second', 1.0, TIME, quantity='time', is_base=True,
         is_metric=True, plural_name='seconds')
add_unit('g', 'gram', 1.0, MASS, quantity='mass', is_base=True,
         is_metric=True, plural_name='grams', synonyms=('gramme',))
add_unit('rad', 'radian', 1.0, ANGLE, quantity='plane angle',
         is_base=True, is_metric=True, plural_name='radians')
add_unit('K', 'kelvin', 1.0, TEMP, quantity='temperature', is_base=True,
         is_metric=True)
add_unit('C', 'coulomb', 1.0, CHARGE, quantity='electric charge',
         is_base=True, is_metric=True, plural_name='coulombs')
add_unit('cd', 'candela', 1.0, LUM, quantity='luminous intensity',
         is_base=True, is_metric=True, plural_name='candelas')

# == Derived Units =====================================================

# -- Dimensionless -----------------------------------------------------

add_unit('%', 'percent', 0.01, quantity='fraction')
add_unit('[ppth]', 'parts per thousand', 1e-3, quantity='fraction')
add_unit('[ppm]', 'parts per million', 1e-6, quantity='fraction')
add_unit('[ppb]', 'parts per billion', 1e-9, quantity='fraction')
add_unit('[pptr]', 'parts per trillion', 1e-12, quantity='fraction')
add_unit('[pi]', 'the number pi', math.pi, quantity='number',
         category=UnitCategory.CONSTANT)
add_unit('mol', 'mole', _AVOGADRO, quantity='amount of substance',
         is_metric=True, plural_name='moles')
add_unit('sr', 'steradian', 1.0, ANGLE ** 2, quantity='solid angle',
         is_metric=True, plural_name='steradians')

# -- SI Derived --------------------------------------------------------

add_unit('Hz', 'hertz', 1.0, FREQ, quantity='frequency', is_metric=True)
add_unit('N', 'newton', 1000.0, FORCE, quantity='force', is_metric=True,
         plural_name='newtons')
add_unit('Pa', 'pascal', 1000.0, PRESSURE, quantity='pressure',
         ci_code='PAL', is_metric=True, plural_name='pascals')
add_unit('J', 'joule', 1000.0, ENERGY, quantity='energy', is_metric=True,
         plural_name='joules')
add_unit('W', 'watt', 1000.0, POWER, quantity='power', is_metric=True,
         plural_name='watts')
add_unit('A', 'ampere', 1.0, CURRENT, quantity='electric current',
         is_metric=True, plural_name='amperes')
add_unit('V', 'volt', 1000.0, POTENTIAL, quantity='electric potential',
         is_metric=True, plural_name='volts')
add_unit('F', 'farad', 0.001, CHARGE / POTENTIAL,
         quantity='electric capacitance', is_metric=True,
         plural_name='farads')
add_unit('Ohm', 'ohm', 1000.0, RESISTANCE,
         quantity='electric resistance', is_metric=True,
         plural_name='ohms')
add_unit('S', 'siemens', 0.001, RESISTANCE.inverse(),
         quantity='electric conductance', ci_code='SIE', is_metric=True)
add_unit('Wb', 'weber', 1000.0, MAG_FLUX, quantity='magnetic flux',
         is_metric=True, plural_name='webers')
add_unit('T', 'tesla', 1000.0, MAG_FLUX / AREA,
         quantity='magnetic flux density', is_metric=True,
         plural_name='teslas')
add_unit('H', 'henry', 1000.0, MAG_FLUX / CURRENT,
         quantity='inductance', is_metric=True, plural_name='henries')
add_unit('lm', 'lumen', 1.0, LUM * ANGLE ** 2, quantity='luminous flux',
         is_metric=True, plural_name='lumens')
add_unit('lx', 'lux', 1.0, LUM * ANGLE ** 2 / AREA,
         quantity='illuminance', is_metric=True)
add_unit('Bq', 'becquerel', 1.0, FREQ, quantity='radioactivity',
         is_metric=True, plural_name='becquerels')
add_unit('Gy', 'gray', 1.0, DOSE, quantity='energy dose', is_metric=True,
         plural_name='grays')
add_unit('Sv', 'sievert', 1.0, DOSE, quantity='dose equivalent',
         is_metric=True, plural_name='sieverts')

# -- Angle -------------------------------------------------------------

add_unit('gon', 'gon', math.pi / 200, ANGLE, quantity='plane angle',
         plural_name='gons')
add_unit('deg', 'degree', math.pi / 180, ANGLE, quantity='plane angle',
         plural_name='degrees')
add_unit("'", 'minute', math.pi / 10800, ANGLE, quantity='plane angle',
         plural_name='minutes')
add_unit("''", 'second', math.pi / 648000, ANGLE, quantity='plane angle',
         plural_name='seconds')

# -- Area & Volume -----------------------------------------------------

add_unit('l', 'liter', 0.001, VOLUME, quantity='volume', is_metric=True,
         plural_name='liters', synonyms=('litre',))
add_unit('L', 'liter', 0.001, VOLUME, quantity='volume', is_metric=True,
         plural_name='liters', synonyms=('litre',))
add_unit('ar', 'are', 100.0, AREA, quantity='area', is_metric=True,
         plural_name='ares')

# -- Time --------------------------------------------------------------

add_unit('min', 'minute', 60.0, TIME, quantity='time',
         plural_name='minutes')
add_unit('h', 'hour', 3600.0, TIME, quantity='time', ci_code='HR',
         plural_name='hours')
add_unit('d', 'day', 86400.0, TIME, quantity='time', plural_name='days')
add_unit('wk', 'week', 604800.0, TIME, quantity='time',
         plural_name='weeks')
add_unit('a_t', 'tropical year', 31556925.216, TIME, quantity='time',
         ci_code='ANN_T', plural_name='tropical years')
add_unit('a_j', 'mean Julian year', 31557600.0, TIME, quantity='time',
         ci_code='ANN_J', plural_name='mean Julian years')
add_unit('a_g', 'mean Gregorian year', 31556952.0, TIME,
         quantity='time', ci_code='ANN_G',
         plural_name='mean Gregorian years')
add_unit('a', 'year', 31557600.0, TIME, quantity='time', ci_code='ANN',
         plural_name='years')
add_unit('mo', 'month', 31557600.0 / 12, TIME, quantity='time',
         plural_name='months')

# -- Mass --------------------------------------------------------------

add_unit('t', 'tonne', 1e6, MASS, quantity='mass', ci_code='TNE',
         is_metric=True, plural_name='tonnes')
add_unit('u', 'unified atomic mass unit', 1.6605402e-24, MASS,
         quantity='mass', ci_code='AMU', is_metric=True,
         plural_name='unified atomic mass units')

# -- Other Metric ------------------------------------------------------

add_unit('bar', 'bar', 1e8, PRESSURE, quantity='pressure',
         is_metric=True, plural_name='bars')
add_unit('eV', 'electronvolt', 1.60217733e-16, ENERGY, quantity='energy',
         is_metric=True, plural_name='electronvolts')
add_unit('pc', 'parsec', 3.085678e16, LEN, quantity='length',
         ci_code='PRS', is_metric=True, plural_name='parsecs')

# -- Natural Constants -------------------------------------------------

_const = {'is_metric': True, 'category': UnitCategory.CONSTANT}

add_unit('[c]', 'velocity of light', 299792458.0, VELOCITY,
         quantity='velocity', **_const)
add_unit('[h]', 'Planck constant', 6.6260755e-31, ENERGY * TIME,
         quantity='action', **_const)
add_unit('[k]', 'Boltzmann constant', 1.380658e-20, ENERGY / TEMP,
         quantity='(unclassified)', **_const)
add_unit('[eps_0]', 'permittivity of vacuum', 8.854187817e-15,
         CHARGE / POTENTIAL / LEN, quantity='electric permittivity',
         **_const)
add_unit('[mu_0]', 'permeability of vacuum', 4e-4 * math.pi,
         FORCE / CURRENT ** 2, quantity='magnetic permeability', **_const)
add_unit('[e]', 'elementary charge', 1.60217733e-19, CHARGE,
         quantity='electric charge', **_const)
add_unit('[m_e]', 'electron mass', 9.1093897e-28, MASS, quantity='mass',
         **_const)
add_unit('[m_p]', 'proton mass', 1.6726231e-24, MASS, quantity='mass',
         **_const)
add_unit('[G]', 'Newtonian constant of gravitation', 6.67259e-14,
         VOLUME / MASS / TIME ** 2, quantity='(unclassified)',
         ci_code='[GC]', **_const)
add_unit('[g]', 'standard acceleration of free fall', 9.80665, ACCEL,
         quantity='acceleration', **_const)
add_unit('atm', 'standard atmosphere', 1.01325e8, PRESSURE,
         quantity='pressure', **_const)
add_unit('[ly]', 'light-year', 299792458.0 * 31557600.0, LEN,
         quantity='length', plural_name='light-years', **_const)
add_unit('gf', 'gram-force', 9.80665, FORCE, quantity='force',
         **_const)
add_unit('[lbf_av]', 'pound force', _LBF_AV, FORCE, quantity='force',
         category=UnitCategory.CONSTANT)

# -- CGS ---------------------------------------------------------------

add_unit('Ky', 'kayser', 100.0, LEN.inverse(), quantity='lineic number',
         is_metric=True)
add_unit('Gal', 'gal', 0.01, ACCEL, quantity='acceleration', ci_code='GL',
         is_metric=True)
add_unit('dyn', 'dyne', 0.01, FORCE, quantity='force', is_metric=True,
         plural_name='dynes')
add_unit('erg', 'erg', 1e-4, ENERGY, quantity='energy', is_metric=True,
         plural_name='ergs')
add_unit('P', 'poise', 100.0, PRESSURE * TIME,
         quantity='dynamic viscosity', is_metric=True)
add_unit('Bi', 'biot', 10.0, CURRENT, quantity='electric current',
         is_metric=True)
add_unit('St', 'stokes', 1e-4, AREA / TIME,
         quantity='kinematic viscosity', is_metric=True)
add_unit('Mx', 'maxwell', 1e-5, MAG_FLUX,
         quantity='flux of magnetic induction', is_metric=True)
add_unit('G', 'gauss', 0.1, MAG_FLUX / AREA,
         quantity='magnetic flux density', ci_code='GS', is_metric=True)
add_unit('Oe', 'oersted', 250 / math.pi, CURRENT / LEN,
         quantity='magnetic field intensity', is_metric=True)
add_unit('Gb', 'gilbert', 2.5 / math.pi, CURRENT,
         quantity='magnetic tension', is_metric=True)
add_unit('sb', 'stilb', 1e4, LUM / AREA, quantity='lum. intensity density',
         is_metric=True)
add_unit('Lmb', 'lambert', 1e4 / math.pi, LUM / AREA,
         quantity='brightness', is_metric=True)
add_unit('ph', 'phot', 1e-4, LUM * ANGLE ** 2 / AREA,
         quantity='illuminance', ci_code='PHT', is_metric=True)
add_unit('Ci', 'curie', 3.7e10, FREQ, quantity='radioactivity',
         is_metric=True, plural_name='curies')
add_unit('R', 'roentgen', 2.58e-7, CHARGE / MASS, quantity='ion dose',
         ci_code='ROE', is_metric=True)
add_unit('RAD', 'radiation absorbed dose', 0.01, DOSE,
         quantity='energy dose', ci_code='[RAD]', is_metric=True)
add_unit('REM', 'radiation equivalent man', 0.01, DOSE,
         quantity='dose equivalent', ci_code='[REM]', is_metric=True)

# -- International Customary -------------------------------------------

add_unit('[in_i]', 'inch', 0.0254, LEN, quantity='length',
         plural_name='inches')
add_unit('[ft_i]', 'foot', 0.3048, LEN, quantity='length',
         plural_name='feet')
add_unit('[yd_i]', 'yard', 0.9144, LEN, quantity='length',
         plural_name='yards')
add_unit('[mi_i]', 'mile', 1609.344, LEN, quantity='length',
         plural_name='miles')
add_unit('[fth_i]', 'fathom', 1.8288, LEN, quantity='depth of water',
         plural_name='fathoms')
add_unit('[nmi_i]', 'nautical mile', 1852.0, LEN, quantity='length',
         plural_name='nautical miles')
add_unit('[kn_i]', 'knot', 1852.0 / 3600, VELOCITY, quantity='velocity',
         plural_name='knots')
add_unit('[sin_i]', 'square inch', 0.0254 ** 2, AREA, quantity='area',
         plural_name='square inches')
add_unit('[sft_i]', 'square foot', 0.3048 ** 2, AREA, quantity='area',
         plural_name='square feet')
add_unit('[syd_i]', 'square yard', 0.9144 ** 2, AREA, quantity='area',
         plural_name='square yards')
add_unit('[cin_i]', 'cubic inch', 0.0254 ** 3, VOLUME, quantity='volume',
         plural_name='cubic inches')
add_unit('[cft_i]', 'cubic foot', 0.3048 ** 3, VOLUME, quantity='volume',
         plural_name='cubic feet')
add_unit('[cyd_i]', 'cubic yard', 0.9144 ** 3, VOLUME, quantity='volume',
         plural_name='cubic yards')
add_unit('[mil_i]', 'mil', 2.54e-5, LEN, quantity='length',
         plural_name='mils')
add_unit('[hd_i]', 'hand', 0.1016, LEN, quantity='height of horses',
         plural_name='hands')

# -- US Survey ---------------------------------------------------------

_FT_US = 1200 / 3937  # US survey foot.

add_unit('[ft_us]', 'US survey foot', _FT_US, LEN, quantity='length',
         plural_name='US survey feet')
add_unit('[yd_us]', 'US survey yard', 3 * _FT_US, LEN, quantity='length',
         plural_name='US survey yards')
add_unit('[in_us]', 'US survey inch', _FT_US / 12, LEN, quantity='length',
         plural_name='US survey inches')
add_unit('[rd_us]', 'rod', 16.5 * _FT_US, LEN, quantity='length',
         plural_name='rods')
add_unit('[ch_us]', "Gunter's chain", 66 * _FT_US, LEN,
         quantity='length', plural_name="Gunter's chains")
add_unit('[mi_us]', 'US survey mile', 5280 * _FT_US, LEN,
         quantity='length', plural_name='US survey miles')
add_unit('[acr_us]', 'acre', 160 * (16.5 * _FT_US) ** 2, AREA,
         quantity='area', plural_name='acres')

# -- US Volumes --------------------------------------------------------

_GAL_US = 231 * 0.0254 ** 3  # 231 cubic inches.

add_unit('[gal_us]', 'Queen Anne\'s wine gallon', _GAL_US, VOLUME,
         quantity='fluid volume', plural_name='gallons',
         synonyms=('US gallon',))
add_unit('[bbl_us]', 'barrel', 42 * _GAL_US, VOLUME,
         quantity='fluid volume', plural_name='barrels')
add_unit('[qt_us]', 'quart', _GAL_US / 4, VOLUME, quantity='fluid volume',
         plural_name='quarts')
add_unit('[pt_us]', 'pint', _GAL_US / 8, VOLUME, quantity='fluid volume',
         plural_name='pints')
add_unit('[gil_us]', 'gill', _GAL_US / 32, VOLUME,
         quantity='fluid volume', plural_name='gills')
add_unit('[foz_us]', 'fluid ounce', _GAL_US / 128, VOLUME,
         quantity='fluid volume', plural_name='fluid ounces')
add_unit('[fdr_us]', 'fluid dram', _GAL_US / 1024, VOLUME,
         quantity='fluid volume', plural_name='fluid drams')
add_unit('[cup_us]', 'cup', _GAL_US / 16, VOLUME, quantity='volume',
         plural_name='cups')
add_unit('[tbs_us]', 'tablespoon', _GAL_US / 256, VOLUME,
         quantity='volume', plural_name='tablespoons')
add_unit('[tsp_us]', 'teaspoon', _GAL_US / 768, VOLUME,
         quantity='volume', plural_name='teaspoons')
add_unit('[bu_us]', 'bushel', 2150.42 * 0.0254 ** 3, VOLUME,
         quantity='dry volume', plural_name='bushels')

# -- British Imperial --------------------------------------------------

_GAL_BR = 4.54609e-3

add_unit('[gal_br]', 'gallon', _GAL_BR, VOLUME, quantity='volume',
         plural_name='gallons', synonyms=('imperial gallon',))
add_unit('[qt_br]', 'quart', _GAL_BR / 4, VOLUME, quantity='volume',
         plural_name='quarts')
add_unit('[pt_br]', 'pint', _GAL_BR / 8, VOLUME, quantity='volume',
         plural_name='pints')
add_unit('[foz_br]', 'fluid ounce', _GAL_BR / 160, VOLUME,
         quantity='volume', plural_name='fluid ounces')

# -- Avoirdupois & Troy ------------------------------------------------

_LB_AV = 453.59237

add_unit('[lb_av]', 'pound', _LB_AV, MASS, quantity='mass',
         plural_name='pounds', synonyms=('lb', 'lbs'))
add_unit('[oz_av]', 'ounce', _LB_AV / 16, MASS, quantity='mass',
         plural_name='ounces', synonyms=('oz',))
add_unit('[dr_av]', 'dram', _LB_AV / 256, MASS, quantity='mass',
         plural_name='drams')
add_unit('[gr]', 'grain', 0.06479891, MASS, quantity='mass',
         plural_name='grains')
add_unit('[scwt_av]', 'short hundredweight', 100 * _LB_AV, MASS,
         quantity='mass', plural_name='short hundredweights')
add_unit('[lcwt_av]', 'long hundredweight', 112 * _LB_AV, MASS,
         quantity='mass', plural_name='long hundredweights')
add_unit('[ston_av]', 'short ton', 2000 * _LB_AV, MASS, quantity='mass',
         plural_name='short tons')
add_unit('[lton_av]', 'long ton', 2240 * _LB_AV, MASS, quantity='mass',
         plural_name='long tons')
add_unit('[stone_av]', 'stone', 14 * _LB_AV, MASS, quantity='mass',
         plural_name='stones')
add_unit('[pwt_tr]', 'pennyweight', 24 * 0.06479891, MASS,
         quantity='mass', plural_name='pennyweights')
add_unit('[oz_tr]', 'troy ounce', 480 * 0.06479891, MASS, quantity='mass',
         plural_name='troy ounces')
add_unit('[lb_tr]', 'troy pound', 5760 * 0.06479891, MASS,
         quantity='mass', plural_name='troy pounds')

# -- Pressure ----------------------------------------------------------

_M_HG = 1.33322387415e8  # Meter of mercury column.
_M_H2O = 9.80665e6  # Meter of water column.

add_unit('m[Hg]', 'meter of mercury column', _M_HG, PRESSURE,
         quantity='pressure', is_metric=True,
         category=UnitCategory.CLINICAL)
add_unit('m[H2O]', 'meter of water column', _M_H2O, PRESSURE,
         quantity='pressure', is_metric=True,
         category=UnitCategory.CLINICAL)
add_unit("[in_i'Hg]", 'inch of mercury column', _M_HG * 0.0254,
         PRESSURE, quantity='pressure', category=UnitCategory.CLINICAL)
add_unit("[in_i'H2O]", 'inch of water column', _M_H2O * 0.0254,
         PRESSURE, quantity='pressure', category=UnitCategory.CLINICAL)
add_unit('[psi]', 'pound per square inch', _LBF_AV / 0.0254 ** 2,
         PRESSURE, quantity='pressure',
         synonyms=('pounds per square inch',))

# -- Energy & Power ----------------------------------------------------

add_unit('cal_th', 'thermochemical calorie', 4184.0, ENERGY,
         quantity='energy', is_metric=True)
add_unit('cal', 'calorie', 4184.0, ENERGY, quantity='energy',
         is_metric=True, plural_name='calories')
add_unit('cal_IT', 'international table calorie', 4186.8, ENERGY,
         quantity='energy', is_metric=True)
add_unit('cal_m', 'mean calorie', 4190.02, ENERGY, quantity='energy',
         is_metric=True)
add_unit('[Cal]', 'nutrition label Calories', 4184000.0, ENERGY,
         quantity='energy', plural_name='Calories')
add_unit('[Btu_IT]', 'international table British thermal unit',
         1055055.85262, ENERGY, quantity='energy')
add_unit('[Btu_th]', 'thermochemical British thermal unit',
         1054350.264488889, ENERGY, quantity='energy')
add_unit('[HP]', 'horsepower', 550 * 0.3048 * _LBF_AV, POWER,
         quantity='power')

# -- Clinical ----------------------------------------------------------

add_unit('U', 'Unit', _AVOGADRO * 1e-6 / 60, FREQ,
         quantity='catalytic activity', is_metric=True,
         category=UnitCategory.CLINICAL)
add_unit('kat', 'katal', _AVOGADRO, FREQ, quantity='catalytic activity',
         is_metric=True, category=UnitCategory.CLINICAL)
add_unit('eq', 'equivalents', _AVOGADRO, quantity='amount of substance',
         is_metric=True, category=UnitCategory.CLINICAL)
add_unit('osm', 'osmole', _AVOGADRO,
         quantity='amount of substance (dissolved particles)',
         is_metric=True, category=UnitCategory.CLINICAL)
add_unit('g%', 'gram percent', 1e4, MASS / VOLUME,
         quantity='mass concentration', is_metric=True,
         category=UnitCategory.CLINICAL)
add_unit('[drp]', 'drop', 5e-8, VOLUME, quantity='volume',
         plural_name='drops', category=UnitCategory.CLINICAL)
add_unit('[iU]', 'international unit', 1.0, quantity='arbitrary',
         is_metric=True, is_arbitrary=True, category=UnitCategory.CLINICAL)
add_unit('[IU]', 'international unit', 1.0, quantity='arbitrary',
         ci_code='[IU]', is_metric=True, is_arbitrary=True,
         category=UnitCategory.CLINICAL)

# -- Information -------------------------------------------------------

add_unit('bit', 'bit', 1.0, quantity='amount of information',
         is_metric=True, plural_name='bits')
add_unit('By', 'byte', 8.0, quantity='amount of information',
         is_metric=True, plural_name='bytes')
add_unit('Bd', 'baud', 1.0, FREQ, quantity='signal transmission rate',
         is_metric=True)

# -- Non-Linear / Special Units ----------------------------------------

# Temperature.
add_unit('Cel', 'degree Celsius', 1.0, TEMP, quantity='temperature',
         is_metric=True, is_special=True, conversion_function='Cel',
         plural_name='degrees Celsius')
add_unit('[degF]', 'degree Fahrenheit', 5 / 9, TEMP,
         quantity='temperature', is_special=True,
         conversion_function='degF', plural_name='degrees Fahrenheit')
add_unit('[degRe]', 'degree Réaumur', 5 / 4, TEMP,
         quantity='temperature', is_special=True,
         conversion_function='degRe', plural_name='degrees Réaumur')
add_unit('[degR]', 'degree Rankine', 5 / 9, TEMP, quantity='temperature',
         plural_name='degrees Rankine')

# Logarithmic.  The base-unit side of [pH] is mol/L.
add_unit('[pH]', 'pH', 1.0, VOLUME.inverse(), quantity='acidity',
         is_special=True, conversion_function='pH',
         conversion_prefix=_AVOGADRO / 0.001,
         category=UnitCategory.CLINICAL)
add_unit('Np', 'neper', 1.0, quantity='level', ci_code='NEP',
         is_metric=True, is_special=True, conversion_function='ln',
         plural_name='nepers')
add_unit('B', 'bel', 1.0, quantity='level', is_metric=True,
         is_special=True, conversion_function='lg', plural_name='bels')
add_unit('bit_s', 'bit', 1.0, quantity='amount of information',
         is_special=True, conversion_function='ld', plural_name='bits')

# Trigonometric.
add_unit("[p'diop]", 'prism diopter', 1.0, ANGLE,
         quantity='refraction of a prism', is_special=True,
         conversion_function='100tan', plural_name='prism diopters')
add_unit('%[slope]', 'percent of slope', 1.0, ANGLE, quantity='slope',
         is_special=True, conversion_function='100tan')

# Homeopathic potencies.
for _code, _scale, _fn in (('[hp_X]', 'decimal', 'hpX'),
                           ('[hp_C]', 'centesimal', 'hpC'),
                           ('[hp_M]', 'millesimal', 'hpM'),
                           ('[hp_Q]', 'quintamillesimal', 'hpQ')):
    add_unit(_code, f'homeopathic potency of {_scale} series', 1.0,
             quantity='homeopathic potency', is_special=True,
             conversion_function=_fn, category=UnitCategory.CLINICAL)
