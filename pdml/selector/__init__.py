from pdml.selector.classifier import apply_quantifier, classify_selector

__all__ = ['apply_quantifier', 'classify_selector']
