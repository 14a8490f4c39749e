import logging

from flask import Blueprint, Flask, abort, flash, jsonify, redirect, render_template, request, session, url_for
from flask_migrate import Migrate
from sqlalchemy.orm import selectinload

from config import configure_logging, get_config
from constants import DEFAULT_SERVINGS, MAX_SERVINGS, MIN_SERVINGS
from models import db, Recipe, RecipeIngredient
from services import (
    ScaleContext, format_amount, scale_ingredients,
    increment_servings, decrement_servings, reset_servings,
)
from utils import sanitize_recipe_name, sanitize_instructions, sanitize_ingredient_fields

log = logging.getLogger('app')

migrate = Migrate()
bp = Blueprint('recipes', __name__)


def safe_int(value, default=1, min_val=None, max_val=None):
    """Safely parse an integer value with optional bounds."""
    try:
        result = int(value) if value else default
        if min_val is not None:
            result = max(min_val, result)
        if max_val is not None:
            result = min(max_val, result)
        return result
    except (ValueError, TypeError):
        return default


def request_data():
    """Posted fields from either a JSON body or a form."""
    return request.get_json(silent=True) or request.form


def error_response(message, status):
    return jsonify({'error': message}), status


def load_recipe(recipe_id):
    return Recipe.query.options(selectinload(Recipe.ingredients)).get_or_404(recipe_id)


# ============================================
# SERVING TARGET (per-visitor display state)
# ============================================

def get_target_servings(recipe):
    """
    The serving count to display: ?servings= wins, then the visitor's
    session, then the recipe's own servings.
    """
    target = session.get('servings', {}).get(str(recipe.id), recipe.servings)
    if 'servings' in request.args:
        target = safe_int(request.args.get('servings'), default=target, min_val=MIN_SERVINGS)
    return target


def set_target_servings(recipe, target):
    targets = dict(session.get('servings', {}))
    targets[str(recipe.id)] = target
    session['servings'] = targets


def apply_serving_action(recipe, action):
    """Run increment/decrement/reset against the current target and store it."""
    target = get_target_servings(recipe)
    if action == 'reset':
        target = reset_servings(recipe.servings)
    elif action == 'increment':
        # Recipes without servings have nothing to scale from
        if target:
            target = increment_servings(target)
    elif action == 'decrement':
        if target:
            target = decrement_servings(target)
    else:
        abort(404)
    set_target_servings(recipe, target)
    log.debug("Recipe %s servings %s -> %s", recipe.id, action, target)
    return target


def scaled_recipe(recipe, target):
    """Recipe dict with every ingredient scaled to `target` servings."""
    ctx = ScaleContext(recipe.servings, target)
    scaled = scale_ingredients([ri.as_ingredient() for ri in recipe.ingredients], ctx)
    return {
        'id': recipe.id,
        'name': recipe.name,
        'servings': target,
        'original_servings': recipe.servings,
        'is_adjusted': not ctx.is_noop,
        'ratio': ctx.ratio,
        'instructions': recipe.instructions,
        'ingredients': [dict(ingredient.to_dict(), id=ri.id)
                        for ri, ingredient in zip(recipe.ingredients, scaled)],
    }


# ============================================
# ROUTES - RECIPES
# ============================================

@bp.route('/')
def index():
    recipes = Recipe.query.order_by(Recipe.name).all()
    return jsonify([{'id': r.id, 'name': r.name, 'servings': r.servings} for r in recipes])


@bp.route('/recipe/add', methods=['POST'])
def recipe_add():
    data = request_data()
    name = sanitize_recipe_name(data.get('name'))
    if not name:
        return error_response('Recipe name is required', 400)
    if Recipe.query.filter_by(name=name).first():
        return error_response(f'Recipe "{name}" already exists', 409)

    # An explicitly blank servings field means the recipe does not say
    if 'servings' in data and data.get('servings') in ('', None):
        servings = None
    else:
        servings = safe_int(data.get('servings'), default=DEFAULT_SERVINGS,
                            min_val=MIN_SERVINGS, max_val=MAX_SERVINGS)
    recipe = Recipe(
        name=name,
        servings=servings,
        instructions=sanitize_instructions(data.get('instructions')),
    )
    db.session.add(recipe)
    db.session.commit()
    log.info("Created recipe %s (%r)", recipe.id, recipe.name)
    return jsonify({'id': recipe.id, 'name': recipe.name, 'servings': recipe.servings}), 201


@bp.route('/recipe/<int:id>/ingredient/add', methods=['POST'])
def recipe_ingredient_add(id):
    recipe = load_recipe(id)
    data = request_data()
    name, amount, unit = sanitize_ingredient_fields(
        data.get('name'), data.get('amount'), data.get('unit'))
    if not name:
        return error_response('Ingredient name is required', 400)

    ri = RecipeIngredient(recipe_id=recipe.id, position=len(recipe.ingredients),
                          name=name, amount=amount, unit=unit)
    db.session.add(ri)
    db.session.commit()
    return jsonify(dict(ri.as_ingredient().to_dict(), id=ri.id)), 201


@bp.route('/recipe/<int:recipe_id>/ingredient/<int:ri_id>/delete', methods=['POST'])
def recipe_ingredient_delete(recipe_id, ri_id):
    ri = RecipeIngredient.query.get_or_404(ri_id)
    if ri.recipe_id != recipe_id:
        abort(404)
    db.session.delete(ri)
    db.session.commit()
    return jsonify({'deleted': ri_id})


# ============================================
# ROUTES - SCALED VIEW
# ============================================

@bp.route('/recipe/<int:id>')
def recipe_view(id):
    recipe = load_recipe(id)
    return render_template('recipe_view.html', recipe=scaled_recipe(recipe, get_target_servings(recipe)))


@bp.route('/recipe/<int:id>/servings/<action>', methods=['POST'])
def recipe_servings(id, action):
    recipe = load_recipe(id)
    target = apply_serving_action(recipe, action)
    if target != recipe.servings:
        flash(f'Adjusted for {target} servings', 'info')
    return redirect(url_for('recipes.recipe_view', id=id))


@bp.route('/api/recipe/<int:id>')
def api_recipe(id):
    recipe = load_recipe(id)
    return jsonify(scaled_recipe(recipe, get_target_servings(recipe)))


@bp.route('/api/recipe/<int:id>/servings/<action>', methods=['POST'])
def api_recipe_servings(id, action):
    recipe = load_recipe(id)
    target = apply_serving_action(recipe, action)
    return jsonify(scaled_recipe(recipe, target))


# ============================================
# APP FACTORY
# ============================================

def create_app(env=None):
    app = Flask(__name__)
    app.config.from_object(get_config(env))
    configure_logging(app.config['LOG_LEVEL'])

    db.init_app(app)
    migrate.init_app(app, db)

    # Keep fraction glyphs readable in JSON responses
    app.json.ensure_ascii = False
    # Register Jinja filter for quantity display
    app.jinja_env.filters['amount'] = format_amount

    app.register_blueprint(bp)
    return app


def init_db(app):
    with app.app_context():
        db.create_all()


if __name__ == '__main__':
    app = create_app()
    init_db(app)
    # host='0.0.0.0' allows access from other devices on the network
    app.run(debug=True, host='0.0.0.0', port=5000, use_reloader=False)
