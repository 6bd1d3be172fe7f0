"""Tests for PirepCollection and SigmetCollection."""

from datetime import timedelta

from stationwx.advisories.collection import PirepCollection, SigmetCollection
from stationwx.advisories.models import (
    Pirep,
    TurbulenceIntensity,
    IcingIntensity,
    AdvisoryType,
    HazardType,
    Severity,
)


class TestPirepCollection:
    """Test PIREP filters."""

    def test_current_and_expired(self, make_pirep):
        fresh = make_pirep(id="fresh")
        stale = make_pirep(id="stale", age=timedelta(hours=13))
        pireps = PirepCollection([fresh, stale])

        assert pireps.current().all() == [fresh]
        assert pireps.expired().all() == [stale]

    def test_severity_filters(self, make_pirep):
        severe = make_pirep(id="sev", icing=IcingIntensity.SEVERE)
        moderate = make_pirep(id="mod", turbulence=TurbulenceIntensity.MODERATE)
        light = make_pirep(id="lgt", turbulence=TurbulenceIntensity.LIGHT)
        pireps = PirepCollection([severe, moderate, light])

        assert pireps.severe().all() == [severe]
        assert pireps.moderate().all() == [moderate]
        assert pireps.moderate_or_worse().all() == [severe, moderate]

    def test_chaining_returns_same_class(self, make_pirep):
        pireps = PirepCollection([make_pirep()])
        assert isinstance(pireps.current().severe(), PirepCollection)

    def test_for_station(self, make_pirep):
        jfk = make_pirep(icao="KJFK")
        bos = make_pirep(icao="KBOS")
        assert PirepCollection([jfk, bos]).for_station("kbos").all() == [bos]

    def test_chronological_and_latest(self, make_pirep):
        older = make_pirep(id="older", age=timedelta(hours=5))
        newer = make_pirep(id="newer", age=timedelta(minutes=10))
        undated = Pirep(id="undated", icao="KJFK")
        pireps = PirepCollection([newer, undated, older])

        assert [p.id for p in pireps.chronological()] == ["undated", "older", "newer"]
        assert pireps.latest() is newer

    def test_latest_empty(self):
        assert PirepCollection([]).latest() is None


class TestSigmetCollection:
    """Test SIGMET filters."""

    def test_validity_filters(self, make_sigmet):
        active = make_sigmet(id="active")
        expired = make_sigmet(id="expired", is_active=False, is_expired=True)
        future = make_sigmet(id="future", is_active=False, is_expired=False)
        sigmets = SigmetCollection([active, expired, future])

        assert sigmets.active().all() == [active]
        assert sigmets.expired().all() == [expired]
        assert sigmets.future().all() == [future]

    def test_severe_and_hazard(self, make_sigmet):
        severe_ice = make_sigmet(id="a", severity=Severity.SEVERE, hazard=HazardType.ICE)
        moderate_turb = make_sigmet(id="b")
        sigmets = SigmetCollection([severe_ice, moderate_turb])

        assert sigmets.severe().all() == [severe_ice]
        assert sigmets.by_hazard(HazardType.TURB).all() == [moderate_turb]

    def test_affecting(self, make_sigmet):
        jfk = make_sigmet(icao="KJFK")
        lax = make_sigmet(icao="KLAX")
        assert SigmetCollection([jfk, lax]).affecting("klax").all() == [lax]

    def test_sigmets_and_airmets(self, make_sigmet):
        sigmet = make_sigmet()
        assert sigmet.type == AdvisoryType.SIGMET
        sigmets = SigmetCollection([sigmet])
        assert sigmets.sigmets().count() == 1
        assert sigmets.airmets().count() == 0

    def test_set_operations(self, make_sigmet):
        a = make_sigmet(id="a")
        b = make_sigmet(id="b", severity=Severity.SEVERE)
        sigmets = SigmetCollection([a, b])

        assert (sigmets - sigmets.severe()).all() == [a]
        assert (sigmets.severe() | sigmets).all() == [b, a]
        assert (sigmets & sigmets.severe()).all() == [b]

    def test_repr_previews_ids(self, make_sigmet):
        sigmets = SigmetCollection([make_sigmet(id="s1")])
        assert repr(sigmets) == "SigmetCollection(['s1'], count=1)"
