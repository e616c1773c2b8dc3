import logging
import unittest
from dataclasses import FrozenInstanceError
import numpy as np
from hmpy.crystal import (
    Axis,
    HermannMauguin,
    HermannMauguin1D,
    HermannMauguin3D,
    SymbolTable,
    default_symbol_table,
)
from hmpy.errors import (
    IndexOutOfRangeError,
    InvalidCenteringError,
    InvalidRotationOrderError,
    InvalidSymbolError,
)

LOG = logging.getLogger(__name__)

SHORT_SYMBOLS = (
    "P1", "P-1", "P2", "P2₁", "C2", "Pm", "Pc", "Cm", "Cc", "P2/m",
    "P2₁/m", "C2/m", "P2/c", "P2₁/c", "C2/c", "P222", "P222₁", "P2₁2₁2", "P2₁2₁2₁", "C222₁",
    "C222", "F222", "I222", "I2₁2₁2₁", "Pmm2", "Pmc2₁", "Pcc2", "Pma2", "Pca2₁", "Pnc2",
    "Pmn2₁", "Pba2", "Pna2₁", "Pnn2", "Cmm2", "Cmc2₁", "Ccc2", "Amm2", "Aem2", "Ama2",
    "Aea2", "Fmm2", "Fdd2", "Imm2", "Iba2", "Ima2", "Pmmm", "Pnnn", "Pccm", "Pban",
    "Pmma", "Pnna", "Pmna", "Pcca", "Pbam", "Pccn", "Pbcm", "Pnnm", "Pmmn", "Pbcn",
    "Pbca", "Pnma", "Cmcm", "Cmce", "Cmmm", "Cccm", "Cmme", "Ccce", "Fmmm", "Fddd",
    "Immm", "Ibam", "Ibca", "Imma", "P4", "P4₁", "P4₂", "P4₃", "I4", "I4₁",
    "P-4", "I-4", "P4/m", "P4₂/m", "P4/n", "P4₂/n", "I4/m", "I4₁/a", "P422", "P42₁2",
    "P4₁22", "P4₁2₁2", "P4₂22", "P4₂2₁2", "P4₃22", "P4₃2₁2", "I422", "I4₁22", "P4mm", "P4bm",
    "P4₂cm", "P4₂nm", "P4cc", "P4nc", "P4₂mc", "P4₂bc", "I4mm", "I4cm", "I4₁md", "I4₁cd",
    "P-42m", "P-42c", "P-42₁m", "P-42₁c", "P-4m2", "P-4c2", "P-4b2", "P-4n2", "I-4m2", "I-4c2",
    "I-42m", "I-42d", "P4/mmm", "P4/mcc", "P4/nbm", "P4/nnc", "P4/mbm", "P4/mnc", "P4/nmm", "P4/ncc",
    "P4₂/mmc", "P4₂/mcm", "P4₂/nbc", "P4₂/nnm", "P4₂/mbc", "P4₂/mnm", "P4₂/nmc", "P4₂/ncm", "I4/mmm", "I4/mcm",
    "I4₁/amd", "I4₁/acd", "P3", "P3₁", "P3₂", "R3", "P-3", "R-3", "P312", "P321",
    "P3₁12", "P3₁21", "P3₂12", "P3₂21", "R32", "P3m1", "P31m", "P3c1", "P31c", "R3m",
    "R3c", "P-31m", "P-31c", "P-3m1", "P-3c1", "R-3m", "R-3c", "P6", "P6₁", "P6₅",
    "P6₂", "P6₄", "P6₃", "P-6", "P6/m", "P6₃/m", "P622", "P6₁22", "P6₅22", "P6₂22",
    "P6₄22", "P6₃22", "P6mm", "P6cc", "P6₃cm", "P6₃mc", "P-6m2", "P-6c2", "P-62m", "P-62c",
    "P6/mmm", "P6/mcc", "P6₃/mcm", "P6₃/mmc", "P23", "F23", "I23", "P2₁3", "I2₁3", "Pm-3",
    "Pn-3", "Fm-3", "Fd-3", "Im-3", "Pa-3", "Ia-3", "P432", "P4₂32", "F432", "F4₁32",
    "I432", "P4₃32", "P4₁32", "I4₁32", "P-43m", "F-43m", "I-43m", "P-43n", "F-43c", "I-43d",
    "Pm-3m", "Pn-3n", "Pm-3n", "Pn-3m", "Fm-3m", "Fm-3c", "Fd-3m", "Fd-3c", "Im-3m", "Ia-3d",
)


class HermannMauguinTestCase(unittest.TestCase):
    fd3m = HermannMauguin[3].from_string("F 4_1/d -3 2/m")
    sg_141 = HermannMauguin[3].from_number(141)
    pg_6m2 = HermannMauguin[3].from_string("-6 m 2")

    def test_dimension_classes(self):
        self.assertIs(HermannMauguin[3], HermannMauguin3D)
        self.assertIs(HermannMauguin[1], HermannMauguin1D)
        for invalid in (0, 4, -1):
            with self.assertRaises(ValueError):
                HermannMauguin[invalid]
        with self.assertRaises(TypeError):
            HermannMauguin("P", (Axis(2), Axis(2), Axis(2)))
        hm = HermannMauguin.from_axes("P", Axis(2), Axis(2), Axis(2))
        self.assertIsInstance(hm, HermannMauguin3D)
        self.assertEqual(hm.long_form(), "P 2 2 2")

    def test_construction(self):
        hm = HermannMauguin[3]("p", (Axis(2, 1), Axis(2, 1), Axis(2, 1)))
        self.assertEqual(hm.centering, "P")
        self.assertEqual(hm.short_form(), "P2₁2₁2₁")

        with self.assertRaises(InvalidRotationOrderError):
            HermannMauguin[3]("P", (Axis(5), Axis(1), Axis(1)))
        with self.assertRaises(InvalidRotationOrderError):
            HermannMauguin[3]("I", (Axis(-8), Axis(1), Axis(1)))
        # no crystallographic restriction on point groups
        pg = HermannMauguin[3](None, (Axis(5), Axis(1), Axis(1)))
        self.assertTrue(pg.is_point_group)

        for invalid in ("X", "D", "G"):
            with self.assertRaises(InvalidCenteringError):
                HermannMauguin[3](invalid, (Axis(2), Axis(1), Axis(1)))
        with self.assertRaises(InvalidSymbolError):
            HermannMauguin[3]("P", (Axis(2), Axis(1)))
        with self.assertRaises(TypeError):
            HermannMauguin[3]("P", ("2", "1", "1"))

    def test_immutable(self):
        with self.assertRaises(FrozenInstanceError):
            self.sg_141.centering = "P"
        self.assertEqual(
            HermannMauguin[3].from_string("P 1 2_1/c 1"),
            HermannMauguin[3].from_number(14),
        )
        self.assertEqual(
            len({self.fd3m, HermannMauguin[3].from_number(227), self.sg_141}), 2
        )

    def test_from_string(self):
        self.assertEqual(self.fd3m.centering, "F")
        self.assertEqual(self.fd3m.axes, (Axis(4, 1, "d"), Axis(-3), Axis(2, glide="m")))
        self.assertEqual(self.fd3m.axis_orders, (4, 3, 2))

        mm2 = HermannMauguin[3].from_string("m m 2")
        self.assertIsNone(mm2.centering)
        self.assertEqual(mm2.axis_orders, (2, 2, 2))

        m = HermannMauguin[3].from_string("m")
        self.assertEqual(m.axes, (Axis(glide="m"), Axis(), Axis()))
        self.assertEqual(m.short_form(), "m")

        p21c = HermannMauguin[3].from_string("p 2_1/c")
        self.assertEqual(p21c.centering, "P")
        self.assertEqual(p21c.axes, (Axis(2, 1, "c"), Axis(), Axis()))

        with self.assertRaises(InvalidSymbolError):
            HermannMauguin[3].from_string("P 2 2 2 2")
        with self.assertRaises(InvalidCenteringError):
            HermannMauguin[3].from_string("Q 2 2 2")
        with self.assertRaises(InvalidRotationOrderError):
            HermannMauguin[3].from_string("P 5")

    def test_point_groups(self):
        self.assertTrue(self.pg_6m2.is_point_group)
        self.assertFalse(self.pg_6m2.is_space_group)
        self.assertEqual(self.pg_6m2.long_form(), "-6 m 2")
        self.assertEqual(self.pg_6m2.short_form(), "-6m2")
        self.assertEqual(HermannMauguin[3].from_string("m -3 m").short_form(), "m-3m")
        self.assertEqual(HermannMauguin[3].from_string("4/m 2/m 2/m").short_form(), "4/mmm")
        self.assertEqual(HermannMauguin[3].from_string("3 2").long_form(), "3 2")
        self.assertEqual(HermannMauguin[3].from_string("-1").short_form(), "-1")
        self.assertEqual(HermannMauguin[3].from_string("1").long_form(), "1")
        for hm in (self.fd3m, self.sg_141):
            self.assertTrue(hm.is_space_group)
            self.assertFalse(hm.is_point_group)

    def test_long_form(self):
        self.assertEqual(self.fd3m.long_form(), "F 4₁/d -3 2/m")
        self.assertEqual(str(self.fd3m), "F 4₁/d -3 2/m")
        self.assertEqual(self.sg_141.long_form(), "I 4₁/a 2/m 2/d")
        self.assertEqual(self.sg_141.long_form(subscripts=False), "I 4_1/a 2/m 2/d")
        self.assertEqual(HermannMauguin[3].from_string("P -1 2 m").long_form(), "P -1")
        self.assertEqual(HermannMauguin[3].from_string("P 1 m 1").long_form(), "P 1 m 1")
        self.assertEqual(HermannMauguin[3].from_string("R 3 2 1").long_form(), "R 3 2")
        self.assertEqual(HermannMauguin[3].from_string("P 3 2 1").long_form(), "P 3 2 1")

    def test_long_form_table(self):
        table = default_symbol_table()
        expected = [table.lookup(3, i) for i in range(1, 231)]
        long_forms = [HermannMauguin[3].from_number(i).long_form() for i in range(1, 231)]
        np.testing.assert_equal(long_forms, expected)

    def test_short_form(self):
        self.assertEqual(self.fd3m.short_form(), "Fd-3m")
        self.assertEqual(self.sg_141.short_form(), "I4₁/amd")
        self.assertEqual(self.sg_141.short_form(subscripts=False), "I4_1/amd")
        self.assertEqual(HermannMauguin[3].from_string("P 3 1 2").short_form(), "P312")
        self.assertEqual(HermannMauguin[3].from_string("R 3 1 2").short_form(), "R32")

    def test_short_form_table(self):
        short_forms = [HermannMauguin[3].from_number(i).short_form() for i in range(1, 231)]
        np.testing.assert_equal(short_forms, SHORT_SYMBOLS)

    def test_from_number(self):
        for invalid in (0, 231, -1):
            with self.assertRaises(IndexOutOfRangeError):
                HermannMauguin[3].from_number(invalid)
        table = SymbolTable({3: ["P 2_1 2_1 2_1"]})
        hm = HermannMauguin[3].from_number(1, table=table)
        self.assertEqual(hm.short_form(), "P2₁2₁2₁")
        with self.assertRaises(IndexOutOfRangeError):
            HermannMauguin[3].from_number(19, table=table)

    def test_describe(self):
        self.assertEqual(
            self.sg_141.describe(),
            "Hermann-Mauguin symbol for a 3-dimensional space group:\n"
            "Long form:\tI 4₁/a 2/m 2/d\n"
            "Short form:\tI4₁/amd",
        )
        self.assertTrue(self.pg_6m2.describe().startswith(
            "Hermann-Mauguin symbol for a 3-dimensional point group:"
        ))
        self.assertEqual(repr(self.fd3m), "<HermannMauguin[3]: F 4₁/d -3 2/m>")

    def test_standardize(self):
        with self.assertRaises(NotImplementedError):
            self.sg_141.standardize()


class LowDimensionTestCase(unittest.TestCase):
    def test_one_dimension(self):
        p1 = HermannMauguin[1].from_number(1)
        pm = HermannMauguin[1].from_number(2)
        self.assertEqual((p1.long_form(), p1.short_form()), ("P 1", "P1"))
        self.assertEqual((pm.long_form(), pm.short_form()), ("P m", "Pm"))
        self.assertEqual(HermannMauguin[1].from_string("m").long_form(), "m")
        with self.assertRaises(InvalidCenteringError):
            HermannMauguin[1].from_string("C 1")
        with self.assertRaises(IndexOutOfRangeError):
            HermannMauguin[1].from_number(3)

    def test_two_dimensions(self):
        hm = HermannMauguin[2]("p", (Axis(4), Axis(glide="m")))
        self.assertEqual(hm.long_form(), "P 4 m")
        self.assertEqual(hm.short_form(), "P4m")
        self.assertEqual(HermannMauguin[2]("c", (Axis(2), Axis())).centering, "C")
        with self.assertRaises(InvalidCenteringError):
            HermannMauguin[2]("I", (Axis(2), Axis()))
        with self.assertRaises(NotImplementedError):
            HermannMauguin[2].from_string("p 4 m m")
        with self.assertRaises(NotImplementedError):
            HermannMauguin[2].from_number(11)
