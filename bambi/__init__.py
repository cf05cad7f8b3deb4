"""Reader for Illumina filter files and SAM/BAM CIGAR and binning helpers."""

__version__ = "0.1.0"
__all__ = ["filterfile", "samtools"]